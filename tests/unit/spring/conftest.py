"""Shared pytest fixtures for spring tests."""

from __future__ import annotations

import pytest

from pdspring.core.spring.factory import make_spring
from pdspring.core.spring.models import EasingFn


@pytest.fixture
def demo_spring() -> EasingFn:
    """The demo page's spring: 0.8s, bounce 0.15 (underdamped)."""
    return make_spring(0.8, 0.15)


@pytest.fixture
def overdamped_spring() -> EasingFn:
    """Bounce -1 maps to a damping ratio of roughly 1.9."""
    return make_spring(0.8, -1.0)


@pytest.fixture
def unstable_spring() -> EasingFn:
    """Bounce 1 maps to negative damping, so oscillation grows."""
    return make_spring(0.8, 1.0)
