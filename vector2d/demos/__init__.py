"""Small simulations built on :mod:`vector2d.math`."""
