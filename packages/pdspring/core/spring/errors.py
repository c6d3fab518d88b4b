"""Spring engine errors."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised by the validated factories for out-of-range perceptual params."""


class PresetNotFoundError(KeyError):
    pass
