"""Core spring library for pdspring."""

from pdspring.core.spring import (
    InvalidArgumentError,
    make_spring,
    make_spring_from_physical_params,
)

__all__ = [
    "InvalidArgumentError",
    "make_spring",
    "make_spring_from_physical_params",
]
