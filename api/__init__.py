"""
API HTTP para bot_builder_core.

Esta capa expone los endpoints REST que traducen JSON a llamadas contra la API
de construcción de modelos de Lex, usando los workflows de `bot_builder_core.engine`.
"""
