"""Closed-form damped harmonic oscillator evaluator.

The evaluator returns the step response of a spring released from rest at 0
toward a target of 1:

    underdamped (zeta < 1):
        x(t) = 1 - e^(-zeta*w*t) * (x0*w*sin(wd*t)/wd + cos(wd*t)),  wd = w*sqrt(1 - zeta^2)
    critically/over damped (zeta >= 1):
        x(t) = 1 - e^(-zeta*w*t) * (x0*w*sinh(a*t)/a + cosh(a*t)),   a = w*sqrt(zeta^2 - 1)

where w = sqrt(k/m), zeta = c / (2*sqrt(k*m)) and x0 = v0 / w.

Arithmetic runs on numpy float64 with floating point errors ignored, so
degenerate parameters (zero mass, negative stiffness) evaluate to nan/inf
rather than raising.
"""

from __future__ import annotations

import math

import numpy as np

from pdspring.core.spring.enums import DampingRegime
from pdspring.core.spring.models import EasingFn, SpringState


def damping_ratio(stiffness: float, damping: float, mass: float) -> float:
    """Return zeta = damping / (2 * sqrt(stiffness * mass))."""
    with np.errstate(all="ignore"):
        zeta = np.float64(damping) / (2 * np.sqrt(np.float64(stiffness) * np.float64(mass)))
    return float(zeta)


def critical_damping(stiffness: float, mass: float) -> float:
    """Return the damping coefficient for critical damping (c = 2 * sqrt(k*m))."""
    if stiffness <= 0 or mass <= 0:
        raise ValueError("stiffness and mass must be > 0")
    return 2.0 * math.sqrt(stiffness * mass)


def classify_damping(zeta: float) -> DampingRegime:
    """Classify a damping ratio.

    Mirrors the evaluator's branch: anything not below 1 (including nan)
    goes through the hyperbolic form.
    """
    if zeta < 1:
        return DampingRegime.UNDERDAMPED
    if zeta == 1:
        return DampingRegime.CRITICAL
    return DampingRegime.OVERDAMPED


def make_evaluator(
    stiffness: float,
    damping: float,
    mass: float,
    initial_velocity: float = 0.0,
) -> EasingFn:
    """Build a spring easing function from physical parameters.

    The returned closure is pure: it holds no mutable state and gives
    bit-identical results for the same t. It is defined for negative t
    as well, though hosts only call it with t >= 0.

    Args:
        stiffness: Spring constant k.
        damping: Damping coefficient c.
        mass: Mass m.
        initial_velocity: Velocity at t=0 (default 0, released from rest).

    Returns:
        Callable mapping t to displacement.

    Example:
        >>> ease = make_evaluator(100, 10, 1)
        >>> ease(0.0)
        0.0
    """
    k = np.float64(stiffness)
    c = np.float64(damping)
    m = np.float64(mass)
    v0 = np.float64(initial_velocity)

    def evaluate(t: float) -> float:
        t = np.float64(t)
        with np.errstate(all="ignore"):
            zeta = c / (2 * np.sqrt(k * m))
            omega = np.sqrt(k / m)
            initial_displacement = v0 / omega
            decay = np.exp(-zeta * omega * t)

            if zeta < 1:
                omega_d = omega * np.sqrt(1 - zeta * zeta)
                return float(
                    1
                    - decay
                    * (
                        (initial_displacement * omega * np.sin(omega_d * t)) / omega_d
                        + np.cos(omega_d * t)
                    )
                )

            alpha = omega * np.sqrt(zeta * zeta - 1)
            if alpha == 0:
                # Critical damping: sinh(a*t)/a -> t as a -> 0.
                return float(1 - decay * (initial_displacement * omega * t + 1))
            bracket = (
                initial_displacement * omega * np.sinh(alpha * t)
            ) / alpha + np.cosh(alpha * t)
            if not np.isfinite(bracket) and np.isfinite(zeta):
                # cosh/sinh overflow near alpha*t = 710; fold the decay into
                # the exponents so the tail stays finite and reaches 1.
                growth = np.exp((alpha - zeta * omega) * t)
                fade = np.exp(-(alpha + zeta * omega) * t)
                return float(
                    1
                    - (
                        (initial_displacement * omega * 0.5 * (growth - fade)) / alpha
                        + 0.5 * (growth + fade)
                    )
                )
            return float(1 - decay * bracket)

    return evaluate


def make_state_evaluator(state: SpringState) -> EasingFn:
    """Build a spring easing function from a SpringState."""
    return make_evaluator(state.stiffness, state.damping, state.mass, state.initial_velocity)
