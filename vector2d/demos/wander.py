"""Agents wandering on a plane that wraps at its edges.

Run from repo root:
  python -m vector2d.demos.wander --steps 600 --agents 24 --seed 7 --trace out/wander.csv
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import math
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from vector2d.math import ops
from vector2d.math.vec2 import Vector2D
from vector2d.settings_schema import WorldSettings

from .trace import TraceLogger

logger = logging.getLogger(__name__)


@dataclass
class Agent:
    position: Vector2D
    velocity: Vector2D = field(default_factory=Vector2D)


class WanderWorld:
    def __init__(self, settings: WorldSettings | None = None) -> None:
        self.settings = settings or WorldSettings()
        self.dimensions = self.settings.dimensions()
        self.rng = random.Random(self.settings.seed)
        self.agents: List[Agent] = []
        self.time = 0.0
        self.step_count = 0

    def spawn(self, count: int | None = None) -> List[Agent]:
        count = self.settings.agents if count is None else count
        spawned = []
        for _ in range(count):
            position = Vector2D(
                self.rng.uniform(0.0, self.dimensions.width),
                self.rng.uniform(0.0, self.dimensions.height),
            )
            velocity = Vector2D.random(self.rng).multiply(self.rng.uniform(0.0, self.settings.max_speed))
            spawned.append(Agent(position, velocity))
        self.agents.extend(spawned)
        return spawned

    def step(self, dt: float | None = None) -> None:
        dt = self.settings.fixed_dt if dt is None else dt
        for idx, agent in enumerate(self.agents):
            steer = Vector2D.random(self.rng).multiply(self.settings.max_force * dt)
            agent.velocity.add(steer).limit(self.settings.max_speed)

            moved = ops.add(agent.position, agent.velocity * dt)
            wrapped = self.dimensions.wrap(moved)
            if not wrapped.equals(moved):
                logger.debug("agent %d wrapped from %r to %r", idx, moved, wrapped)
            agent.position = wrapped

        self.time += dt
        self.step_count += 1

    def nearest_distance(self, agent: Agent) -> float:
        """Shortest wrap-around distance from ``agent`` to any other agent."""
        distances = [
            agent.position.distance(other.position, self.dimensions)
            for other in self.agents
            if other is not agent
        ]
        return min(distances, default=math.inf)

    def neighbours_relative_to(self, agent: Agent, radius: float) -> List[Vector2D]:
        """Positions of agents within ``radius``, moved to the side nearest ``agent``.

        The returned points may lie outside the plane; they are where a viewer
        centred on ``agent`` would draw them.
        """
        return [
            other.position.wrap_relative_to(agent.position, self.dimensions)
            for other in self.agents
            if other is not agent and agent.position.distance(other.position, self.dimensions) <= radius
        ]

    def mean_speed(self) -> float:
        if not self.agents:
            return 0.0
        return sum(agent.velocity.magnitude() for agent in self.agents) / len(self.agents)

    def invalid_agents(self) -> List[int]:
        return [
            idx
            for idx, agent in enumerate(self.agents)
            if agent.position.invalid() or agent.velocity.invalid()
        ]


def run(settings: WorldSettings, trace_path: str | Path | None = None) -> WanderWorld:
    world = WanderWorld(settings)
    world.spawn()

    trace = TraceLogger(trace_path) if trace_path else None
    try:
        if trace is not None:
            trace.log(world)
        for _ in range(settings.steps):
            world.step()
            if trace is not None:
                trace.log(world)

            if settings.report_every > 0 and world.step_count % settings.report_every == 0:
                nearest = min((world.nearest_distance(a) for a in world.agents), default=math.inf)
                logger.info(
                    "step=%d t=%.2fs mean_speed=%.2f nearest=%.2f",
                    world.step_count,
                    world.time,
                    world.mean_speed(),
                    nearest,
                )

            bad = world.invalid_agents()
            if bad:
                logger.warning("step=%d agents with invalid state: %s", world.step_count, bad)
    finally:
        if trace is not None:
            trace.close()

    return world


def _load_settings(path: str) -> WorldSettings:
    settings_path = Path(path)
    if not settings_path.exists():
        return WorldSettings()
    try:
        data = json.loads(settings_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid settings JSON: {settings_path}") from exc
    return WorldSettings.from_json(data if isinstance(data, dict) else {})


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Wander agents around a wrap-around plane.")
    parser.add_argument("--settings", type=str, default=None, help="Path to settings JSON. Defaults are used when omitted.")
    parser.add_argument("--width", type=float, default=None, help="Plane width.")
    parser.add_argument("--height", type=float, default=None, help="Plane height.")
    parser.add_argument("--agents", type=int, default=None, help="Number of agents.")
    parser.add_argument("--max-speed", dest="max_speed", type=float, default=None, help="Speed limit per agent.")
    parser.add_argument("--max-force", dest="max_force", type=float, default=None, help="Random steering strength.")
    parser.add_argument("--dt", dest="fixed_dt", type=float, default=None, help="Timestep in seconds.")
    parser.add_argument("--steps", type=int, default=None, help="Number of steps to run.")
    parser.add_argument("--report-every", dest="report_every", type=int, default=None, help="Log a summary every N steps.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument("--trace", type=str, default=None, help="CSV trace path.")
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> WorldSettings:
    base = _load_settings(args.settings) if args.settings else WorldSettings()
    overrides = {
        name: getattr(args, name)
        for name in ("width", "height", "agents", "max_speed", "max_force", "fixed_dt", "steps", "report_every", "seed")
        if getattr(args, name) is not None
    }
    return dataclasses.replace(base, **overrides)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    settings = resolve_settings(args)
    run(settings, trace_path=args.trace)


if __name__ == "__main__":
    main()
