"""Spring sampling infrastructure.

This module samples spring easing functions into point lists or frame
arrays, and derives properties of the sampled curve (overshoot, settling
time).
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from pdspring.core.spring.models import EasingFn, SpringSample


def sample_spring(
    easing: EasingFn,
    n_samples: int,
    *,
    duration: float = 1.0,
) -> list[SpringSample]:
    """Sample a spring on the closed interval [0, duration].

    The end point is included so the settled tail of the curve is visible.

    Args:
        easing: Spring easing function.
        n_samples: Number of samples to generate (must be >= 2).
        duration: Time span to sample, in the easing function's time units.

    Returns:
        List of SpringSamples with increasing t.

    Raises:
        ValueError: If n_samples < 2 or duration <= 0.

    Example:
        >>> from pdspring.core.spring.factory import make_spring
        >>> points = sample_spring(make_spring(0.8, 0.15), 5, duration=2.0)
        >>> [p.t for p in points]
        [0.0, 0.5, 1.0, 1.5, 2.0]
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")
    if duration <= 0:
        raise ValueError("duration must be > 0")

    t_grid = np.linspace(0.0, duration, n_samples)
    return [SpringSample(t=float(t), v=easing(float(t))) for t in t_grid]


def sample_frames(easing: EasingFn, duration: float, fps: int = 60) -> np.ndarray:
    """Sample a spring at frame times 0, 1/fps, ... up to duration inclusive.

    Args:
        easing: Spring easing function.
        duration: Time span in seconds (must be > 0).
        fps: Frames per second (must be > 0).

    Returns:
        Array of displacements, one per frame.

    Raises:
        ValueError: If duration <= 0 or fps <= 0.
    """
    if duration <= 0:
        raise ValueError("duration must be > 0")
    if fps <= 0:
        raise ValueError("fps must be > 0")

    n_frames = int(np.floor(duration * fps + 1e-9)) + 1
    times = np.arange(n_frames) / fps
    return np.array([easing(float(t)) for t in times], dtype=np.float64)


def is_overshooting(
    values: Iterable[float],
    target: float = 1.0,
    tolerance: float = 1e-3,
) -> bool:
    """Return True if any value exceeds target by more than tolerance."""
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return False
    return bool(np.any(arr > target + tolerance))


def estimate_settling_time(
    easing: EasingFn,
    *,
    epsilon: float = 1e-3,
    max_time: float = 10.0,
    fps: int = 240,
) -> float | None:
    """Estimate when a spring comes to rest at 1.

    Samples the curve at fps over [0, max_time] and returns the first frame
    time after which every sample stays within epsilon of 1.

    Args:
        easing: Spring easing function.
        epsilon: Allowed distance from the target.
        max_time: Sampling window in seconds.
        fps: Sampling rate.

    Returns:
        Settling time in seconds, or None if the curve has not settled by
        max_time (unstable or very slow springs).

    Raises:
        ValueError: If epsilon <= 0, max_time <= 0 or fps <= 0.
    """
    if epsilon <= 0:
        raise ValueError("epsilon must be > 0")

    values = sample_frames(easing, max_time, fps)
    outside = ~(np.abs(values - 1.0) <= epsilon)
    if not outside.any():
        return 0.0
    last_outside = int(np.flatnonzero(outside)[-1])
    if last_outside == len(values) - 1:
        return None
    return (last_outside + 1) / fps
