"""Enums for the spring engine."""

from __future__ import annotations

from enum import Enum


class DampingRegime(str, Enum):
    """Qualitative behaviour of a damped oscillator, from its damping ratio.

    - UNDERDAMPED: zeta < 1, oscillates around the target while settling
    - CRITICAL: zeta == 1, fastest approach without oscillation
    - OVERDAMPED: zeta > 1, creeps toward the target without oscillation
    """

    UNDERDAMPED = "underdamped"
    CRITICAL = "critical"
    OVERDAMPED = "overdamped"
