"""Random number generation."""

from real_numerics.random.pcg import PCG128Random

__all__ = ["PCG128Random"]
