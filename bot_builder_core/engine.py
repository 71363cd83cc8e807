from __future__ import annotations

"""
bot_builder_core.engine
=======================

Orquestadores de las dos operaciones del servicio sobre Lex:

- `BotCreator.create`: PutBot → PutBotAlias
- `BotUpdater.update`: GetBot → PutIntent → PutBot

Reglas comunes
--------------
- Las llamadas son estrictamente secuenciales; la primera que falla corta el flujo
  y su mensaje se devuelve tal cual en un `OperationResult.failure`.
- No hay reintentos ni rollback: si PutBot funcionó y PutBotAlias falló, el bot
  queda creado sin alias.
- Cada invocación abre su propio cliente con las credenciales del proceso
  (`Settings` se recibe en el constructor, no se relee por request).

Este módulo NO conoce HTTP. La capa FastAPI (`api.routes.bots`) traduce el
resultado a códigos de estado.
"""

import logging
from typing import Any, Callable

from botocore.exceptions import BotoCoreError, ClientError

from . import lex_client
from .config import ConfigurationError, Settings
from .domain_models import (
    BotDefinition,
    CreateBotCommand,
    IntentDefinition,
    UpdateBotCommand,
    plain_text_messages,
)
from .lex_requests import (
    build_get_bot_request,
    build_put_bot_alias_request,
    build_put_bot_request,
    build_put_intent_request,
    parse_bot_definition,
    parse_intent_ref,
)
from .results import OperationResult

logger = logging.getLogger(__name__)

BOT_CREATED_MESSAGE = "New Bot Created."
BOT_UPDATED_MESSAGE = "Bot Updated with new intent."

ClientFactory = Callable[[Settings], Any]

# Errores que se reportan como "Server Error" (boto3/botocore y credenciales faltantes)
REMOTE_ERRORS = (ClientError, BotoCoreError, ConfigurationError)


class BotCreator:
    """Crea un bot nuevo y publica un alias con su mismo nombre."""

    def __init__(self, settings: Settings, client_factory: ClientFactory = lex_client.get_client):
        self.settings = settings
        self.client_factory = client_factory

    def create(self, command: CreateBotCommand) -> OperationResult:
        """
        Flujo:
        1) Envolver abort/clarificación como mensajes de texto plano.
        2) PutBot (maxAttempts de clarificación = 5, sin intents).
        3) PutBotAlias con alias == nombre del bot, apuntando a $LATEST.

        Returns:
            OperationResult con "New Bot Created." o el error del paso que falló.
        """
        bot = BotDefinition(
            name=command.name,
            locale=command.locale,
            child_directed=command.child_directed,
            abort_messages=plain_text_messages(command.abort_messages),
            clarification_messages=plain_text_messages(command.clarification_prompts),
        )

        try:
            client = self.client_factory(self.settings)
            lex_client.put_bot(client, build_put_bot_request(bot))
        except REMOTE_ERRORS as e:
            logger.error(f"PutBot falló para bot '{command.name}': {e}")
            return OperationResult.failure(str(e))

        try:
            lex_client.put_bot_alias(client, build_put_bot_alias_request(bot.name))
        except REMOTE_ERRORS as e:
            logger.error(f"PutBotAlias falló para bot '{command.name}': {e}")
            return OperationResult.failure(str(e))

        logger.info(f"Bot '{command.name}' creado con alias '{command.name}'")
        return OperationResult.success(BOT_CREATED_MESSAGE)


class BotUpdater:
    """Agrega un intent nuevo a un bot existente (read-modify-write sobre Lex)."""

    def __init__(self, settings: Settings, client_factory: ClientFactory = lex_client.get_client):
        self.settings = settings
        self.client_factory = client_factory

    def update(self, command: UpdateBotCommand) -> OperationResult:
        """
        Flujo:
        1) GetBot(name, versionOrAlias) → definición actual + checksum.
        2) PutIntent con mensajes de conclusión, utterances y ReturnIntent.
        3) Agregar (nombre, versión) del intent al final de los intents existentes.
        4) PutBot con checksum, nombre, locale y child_directed leídos en (1),
           reemplazando por completo los mensajes de abort y clarificación.

        El checksum tiene que ser el de la lectura hecha en este mismo request;
        si otro cliente modificó el bot en el medio, Lex rechaza el PutBot.
        """
        try:
            client = self.client_factory(self.settings)
            fetched = lex_client.get_bot(
                client, build_get_bot_request(command.name, command.version)
            )
        except REMOTE_ERRORS as e:
            logger.error(f"GetBot falló para bot '{command.name}': {e}")
            return OperationResult.failure(str(e))

        bot = parse_bot_definition(fetched)

        intent = IntentDefinition(
            name=command.intent_name,
            conclusion_messages=plain_text_messages(command.messages),
            sample_utterances=list(command.utterances),
        )
        try:
            created_intent = lex_client.put_intent(client, build_put_intent_request(intent))
        except REMOTE_ERRORS as e:
            logger.error(f"PutIntent falló para intent '{command.intent_name}': {e}")
            return OperationResult.failure(str(e))

        bot.intents.append(parse_intent_ref(created_intent))
        bot.abort_messages = plain_text_messages(command.abort_messages)
        bot.clarification_messages = plain_text_messages(command.clarification_prompts)

        try:
            lex_client.put_bot(client, build_put_bot_request(bot))
        except REMOTE_ERRORS as e:
            logger.error(f"PutBot falló al actualizar bot '{bot.name}': {e}")
            return OperationResult.failure(str(e))

        logger.info(f"Bot '{bot.name}' actualizado: {len(bot.intents)} intents")
        return OperationResult.success(BOT_UPDATED_MESSAGE, value=bot)
