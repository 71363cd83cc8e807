"""Rutas de la API."""

from . import bots

__all__ = ["bots"]
