"""MT19937-64 random number generator (rand) and runtime helpers (utils)."""

__version__ = "0.1.0"
__all__ = ["rand", "utils"]