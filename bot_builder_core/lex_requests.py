from __future__ import annotations

"""
bot_builder_core.lex_requests
=============================

Traducción entre los modelos de dominio y los payloads de la API de
construcción de modelos de Lex (V1, cliente boto3 `lex-models`).

- build_*: arman los kwargs para cada operación (PutBot, PutBotAlias, GetBot, PutIntent).
- parse_*: convierten las respuestas de Lex a modelos de dominio.

Funciones puras: no hablan con AWS. Eso permite testear la forma exacta de
cada request sin red.
"""

from typing import Any, Dict, List

from .domain_models import (
    LATEST_VERSION,
    PLAIN_TEXT,
    BotDefinition,
    IntentDefinition,
    IntentRef,
    Message,
)

CLARIFICATION_MAX_ATTEMPTS = 5


def _serialize_messages(messages: List[Message]) -> List[Dict[str, str]]:
    return [{"content": m.content, "contentType": m.content_type} for m in messages]


def _parse_messages(container: Dict[str, Any] | None) -> List[Message]:
    if not container:
        return []
    return [
        Message(content=m.get("content", ""), content_type=m.get("contentType", PLAIN_TEXT))
        for m in container.get("messages", [])
    ]


def build_put_bot_request(bot: BotDefinition) -> Dict[str, Any]:
    """
    Arma el request de PutBot.

    - `clarificationPrompt.maxAttempts` siempre es 5.
    - `intents` solo se envía si el bot tiene intents (camino de update).
    - `checksum` solo se envía si existe (bot ya creado en Lex).
    """
    request: Dict[str, Any] = {
        "name": bot.name,
        "locale": bot.locale,
        "childDirected": bot.child_directed,
        "clarificationPrompt": {
            "messages": _serialize_messages(bot.clarification_messages),
            "maxAttempts": CLARIFICATION_MAX_ATTEMPTS,
        },
        "abortStatement": {
            "messages": _serialize_messages(bot.abort_messages),
        },
    }
    if bot.intents:
        request["intents"] = [
            {"intentName": ref.intent_name, "intentVersion": ref.intent_version}
            for ref in bot.intents
        ]
    if bot.checksum:
        request["checksum"] = bot.checksum
    return request


def build_put_bot_alias_request(bot_name: str) -> Dict[str, Any]:
    """El alias se llama igual que el bot y apunta a $LATEST."""
    return {
        "name": bot_name,
        "botName": bot_name,
        "botVersion": LATEST_VERSION,
    }


def build_get_bot_request(name: str, version_or_alias: str) -> Dict[str, Any]:
    return {"name": name, "versionOrAlias": version_or_alias}


def build_put_intent_request(intent: IntentDefinition) -> Dict[str, Any]:
    return {
        "name": intent.name,
        "conclusionStatement": {
            "messages": _serialize_messages(intent.conclusion_messages),
        },
        "sampleUtterances": list(intent.sample_utterances),
        "fulfillmentActivity": {"type": intent.fulfillment_type},
    }


def parse_bot_definition(response: Dict[str, Any]) -> BotDefinition:
    """
    Convierte la respuesta de GetBot en `BotDefinition`.

    Un bot sin intents no trae la clave `intents`: se normaliza a lista vacía.
    """
    return BotDefinition(
        name=response["name"],
        locale=response.get("locale", ""),
        child_directed=bool(response.get("childDirected", False)),
        abort_messages=_parse_messages(response.get("abortStatement")),
        clarification_messages=_parse_messages(response.get("clarificationPrompt")),
        intents=[
            IntentRef(intent_name=i["intentName"], intent_version=i["intentVersion"])
            for i in response.get("intents", [])
        ],
        checksum=response.get("checksum"),
        version=response.get("version"),
    )


def parse_intent_ref(response: Dict[str, Any]) -> IntentRef:
    return IntentRef(intent_name=response["name"], intent_version=response["version"])
