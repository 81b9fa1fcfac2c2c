"""Error types for the kata utilities."""


class KataError(ValueError):
    """Raised when a kata function receives input it cannot work with."""
