"""
Dependencias de FastAPI para construir los workflows del engine.

Los handlers reciben `BotCreator` / `BotUpdater` ya construidos con la
configuración del proceso. En tests se reemplazan con
`app.dependency_overrides`.
"""

from fastapi import Depends

from bot_builder_core.config import Settings, get_settings
from bot_builder_core.engine import BotCreator, BotUpdater


def get_app_settings() -> Settings:
    """Configuración cacheada del proceso (resuelta al arrancar)."""
    return get_settings()


def get_bot_creator(settings: Settings = Depends(get_app_settings)) -> BotCreator:
    return BotCreator(settings)


def get_bot_updater(settings: Settings = Depends(get_app_settings)) -> BotUpdater:
    return BotUpdater(settings)
