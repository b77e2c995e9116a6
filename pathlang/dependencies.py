"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from pathlang.config import Settings, settings
from pathlang.engine.config import ParserConfig


def get_settings() -> Settings:
    return settings


def get_parser_config(app_settings: Settings = Depends(get_settings)) -> ParserConfig:
    return ParserConfig(
        strict_numbers=app_settings.pathlang_strict_numbers,
        arc_angle_units=app_settings.pathlang_arc_angle_units,
    )
