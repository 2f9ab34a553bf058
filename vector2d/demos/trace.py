"""CSV trace logging for wander runs."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .wander import WanderWorld


class TraceLogger:
    """Write one row per agent per logged step."""

    HEADER = ["step", "time", "agent", "x", "y", "vx", "vy", "heading", "speed"]

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self.HEADER)

    def log(self, world: "WanderWorld") -> None:
        for idx, agent in enumerate(world.agents):
            self._writer.writerow(
                [
                    world.step_count,
                    float(world.time),
                    idx,
                    float(agent.position.x),
                    float(agent.position.y),
                    float(agent.velocity.x),
                    float(agent.velocity.y),
                    agent.velocity.heading(),
                    agent.velocity.magnitude(),
                ]
            )

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
