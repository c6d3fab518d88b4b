"""Shared utilities for pdspring."""
