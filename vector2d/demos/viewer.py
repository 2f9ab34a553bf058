"""Matplotlib viewer for the wander demo.

Draws every agent on the plane plus, for agent 0, its neighbours as seen
from agent 0's side of the wrap. Neighbours across an edge are drawn outside
the plane outline, where agent 0 "sees" them.

Run from repo root:
  python -m vector2d.demos.viewer --agents 40 --radius 120 --seed 3
"""

from __future__ import annotations

import argparse
import logging
import time

from vector2d import config
from vector2d.settings_schema import WorldSettings

from .wander import WanderWorld

logger = logging.getLogger(__name__)


def run(settings: WorldSettings, radius: float, duration: float, fps: float, steps_per_frame: int):
    """Run the visual viewer."""

    # Import *inside* run so that users without matplotlib can still import the package.
    import matplotlib.pyplot as plt
    from matplotlib.animation import FuncAnimation

    world = WanderWorld(settings)
    world.spawn()
    dims = world.dimensions

    fig, ax = plt.subplots()

    # Plane outline
    gx = [0.0, dims.width, dims.width, 0.0, 0.0]
    gy = [0.0, 0.0, dims.height, dims.height, 0.0]
    (plane_line,) = ax.plot(gx, gy, linewidth=1)

    agent_scatter = ax.scatter([], [], s=12)
    focus_scatter = ax.scatter([], [], s=40, marker="x")
    neighbour_scatter = ax.scatter([], [], s=24, facecolors="none", edgecolors="tab:red")

    margin = radius
    ax.set_xlim(-margin, dims.width + margin)
    ax.set_ylim(-margin, dims.height + margin)
    ax.set_aspect("equal")

    start_t = time.time()

    def _update(_frame_idx: int):
        elapsed = time.time() - start_t
        if duration > 0 and elapsed >= duration:
            plt.close(fig)
            return []

        for _ in range(max(1, int(steps_per_frame))):
            world.step()

        agent_scatter.set_offsets([tuple(a.position) for a in world.agents])
        if world.agents:
            focus = world.agents[0]
            focus_scatter.set_offsets([tuple(focus.position)])
            neighbours = world.neighbours_relative_to(focus, radius)
            neighbour_scatter.set_offsets([tuple(p) for p in neighbours] or [(float("nan"), float("nan"))])
            ax.set_title(
                "t={:.1f}s  neighbours={}  nearest={:.1f}".format(
                    world.time, len(neighbours), world.nearest_distance(focus)
                )
            )

        return [plane_line, agent_scatter, focus_scatter, neighbour_scatter]

    interval_ms = int(1000.0 / max(1.0, float(fps)))
    # Keep a reference so the animation is not garbage collected before show().
    anim = FuncAnimation(fig, _update, interval=interval_ms, blit=False)
    logger.info("viewer running: %d agents on %.0fx%.0f", len(world.agents), dims.width, dims.height)
    plt.show()
    return anim


def main():
    parser = argparse.ArgumentParser(description="Matplotlib viewer for the wander demo")
    parser.add_argument("--duration", type=float, default=0.0, help="seconds to run (0 = run until closed)")
    parser.add_argument("--width", type=float, default=config.DEFAULT_WIDTH)
    parser.add_argument("--height", type=float, default=config.DEFAULT_HEIGHT)
    parser.add_argument("--agents", type=int, default=config.DEFAULT_AGENTS)
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    parser.add_argument("--radius", type=float, default=100.0, help="neighbour radius around agent 0")
    parser.add_argument("--fps", type=float, default=30.0, help="viewer refresh rate")
    parser.add_argument("--steps-per-frame", type=int, default=2)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = WorldSettings(width=args.width, height=args.height, agents=args.agents, seed=args.seed)
    run(settings, args.radius, args.duration, args.fps, args.steps_per_frame)


if __name__ == "__main__":
    main()
