"""
bot_builder_core
================

Core del servicio: configuración, modelos de dominio, armado de requests para
Lex y los workflows de creación/actualización de bots.

La capa HTTP (`api`) depende de este paquete, nunca al revés.
"""
