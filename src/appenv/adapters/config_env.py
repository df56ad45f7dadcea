"""Env configuration adapter producing builder defaults."""

from __future__ import annotations

from ..config import config
from ..core.config_model import BuilderConfig


def load_builder_defaults() -> BuilderConfig:
    return BuilderConfig(
        app_name=config.APP_NAME or None,
        properties_header=config.PROPERTIES_HEADER,
    )
