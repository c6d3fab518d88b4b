"""Configuration models and loaders."""

from pdspring.core.config.loader import detect_format, load_app_config, load_config
from pdspring.core.config.models import AppConfig, LoggingConfig, SamplingConfig, SpringConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "SamplingConfig",
    "SpringConfig",
    "detect_format",
    "load_app_config",
    "load_config",
]
