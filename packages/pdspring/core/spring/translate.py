"""Perceptual-to-physical spring parameter translation.

Maps a (duration, bounce) pair, the perceptual spring parameters introduced
in WWDC 2023 "Animate with springs", to stiffness/damping/mass.

https://wwdcnotes.com/documentation/wwdcnotes/wwdc23-10158-animate-with-springs/
"""

from __future__ import annotations

import math

from pdspring.core.spring.models import PhysicalParams

# Stretches the perceptual duration to the oscillator's time constant so the
# curve settles visually where framer-motion's spring generator does.
DURATION_CORRECTION = 1.2

SPRING_MASS = 1.0


def translate_parameters(duration: float, bounce: float) -> PhysicalParams:
    """Translate perceptual spring params to physical params.

    Inputs are not validated here; make_spring() validates before calling.
    Constants and sign placement are kept exactly as in the reference
    mapping so sampled curves match it.

    Args:
        duration: Perceived duration in seconds (> 0).
        bounce: Bounce amount, nominally in [-1, 1].

    Returns:
        PhysicalParams with mass fixed at 1.

    Example:
        >>> params = translate_parameters(0.8, 0.15)
        >>> round(params.stiffness, 2), round(params.damping, 2)
        (42.84, 10.13)
    """
    bnc = 1 - bounce
    adjusted_duration = duration * DURATION_CORRECTION

    mass = SPRING_MASS
    root = (2 * math.pi) / adjusted_duration
    stiffness = root**2

    if bnc >= 0:
        damping = (1 - (4 * math.pi * bnc) / adjusted_duration) * -1
    else:
        damping = ((4 * math.pi) / (adjusted_duration + 4 * math.pi * bnc)) * -1

    return PhysicalParams(stiffness=stiffness, damping=damping, mass=mass)
