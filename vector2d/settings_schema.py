"""World settings for the wander demo."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from . import config
from .math.dimensions import Dimensions


@dataclass
class WorldSettings:
    width: float = config.DEFAULT_WIDTH
    height: float = config.DEFAULT_HEIGHT
    agents: int = config.DEFAULT_AGENTS
    max_speed: float = config.DEFAULT_MAX_SPEED
    max_force: float = config.DEFAULT_MAX_FORCE
    fixed_dt: float = config.DEFAULT_FIXED_DT
    steps: int = config.DEFAULT_STEPS
    report_every: int = config.DEFAULT_REPORT_EVERY
    seed: int | None = config.DEFAULT_SEED

    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "WorldSettings":
        """Build settings from a parsed JSON object.

        Unknown keys are ignored and missing keys keep their defaults. Numeric
        fields are coerced, so a bad value raises ``ValueError``.
        """
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in payload:
                continue
            raw = payload[f.name]
            if f.name == "seed":
                values[f.name] = None if raw is None else int(raw)
            elif f.type == "int":
                values[f.name] = int(raw)
            else:
                values[f.name] = float(raw)
        return cls(**values)
