"""Default configuration values for the vector2d demos."""

from __future__ import annotations

DEFAULT_WIDTH = 640.0
DEFAULT_HEIGHT = 480.0
DEFAULT_AGENTS = 24
DEFAULT_MAX_SPEED = 120.0
DEFAULT_MAX_FORCE = 40.0
DEFAULT_FIXED_DT = 1.0 / 60.0
DEFAULT_STEPS = 600
DEFAULT_REPORT_EVERY = 60
DEFAULT_SEED = None

