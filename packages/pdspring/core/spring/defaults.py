"""Default and preset parameters for perceptual springs.

Defined separately from the factory to avoid circular imports with config.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pdspring.core.spring.errors import PresetNotFoundError
from pdspring.core.spring.models import PerceptualParams

logger = logging.getLogger(__name__)

# Neutral parameters used when the caller supplies none
DEFAULT_SPRING_PARAMS = {
    "duration": 0.8,
    "bounce": 0.3,
}

# Named springs from the reference platform, plus the demo page's spring
SPRING_PRESETS: dict[str, PerceptualParams] = {
    "smooth": PerceptualParams(duration=0.5, bounce=0.0),
    "snappy": PerceptualParams(duration=0.5, bounce=0.15),
    "bouncy": PerceptualParams(duration=0.5, bounce=0.3),
    "demo": PerceptualParams(duration=0.8, bounce=0.15),
}


def _norm_key(s: str) -> str:
    """Normalize user-provided preset names to a stable lookup key."""
    return "".join(ch.lower() if ch.isalnum() else "_" for ch in s).strip("_")


def list_presets(
    extra: Mapping[str, PerceptualParams] | None = None,
) -> dict[str, PerceptualParams]:
    """Return built-in presets merged with extra ones (extra wins)."""
    merged = {_norm_key(name): params for name, params in SPRING_PRESETS.items()}
    for name, params in (extra or {}).items():
        key = _norm_key(name)
        if key in merged:
            logger.debug("Preset %r overrides a built-in preset", key)
        merged[key] = params
    return merged


def get_preset(
    name: str,
    extra: Mapping[str, PerceptualParams] | None = None,
) -> PerceptualParams:
    """Look up a preset by name.

    Args:
        name: Preset name; case and punctuation are ignored.
        extra: Additional presets (e.g. from config) that shadow built-ins.

    Returns:
        The preset's PerceptualParams.

    Raises:
        PresetNotFoundError: If no preset matches.
    """
    presets = list_presets(extra)
    key = _norm_key(name)
    if key not in presets:
        raise PresetNotFoundError(f"Unknown spring preset: {name!r}")
    return presets[key]
