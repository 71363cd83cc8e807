from __future__ import annotations

"""
bot_builder_core.domain_models
==============================

Modelos de dominio (dataclasses) que viajan entre la capa HTTP y Lex.

- `Message`: un mensaje de texto plano (abort, clarificación o conclusión).
- `IntentRef`: par (nombre, versión) de un intent asociado a un bot.
- `IntentDefinition`: intent nuevo a definir en Lex.
- `BotDefinition`: definición completa de un bot tal como la devuelve/recibe Lex.
- `CreateBotCommand` / `UpdateBotCommand`: entradas de los workflows del engine.

Estos objetos no persisten: viven lo que dura un request.
Este módulo NO habla con AWS ni con HTTP.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

PLAIN_TEXT = "PlainText"
RETURN_INTENT = "ReturnIntent"
LATEST_VERSION = "$LATEST"


@dataclass(frozen=True)
class Message:
    content: str
    content_type: str = PLAIN_TEXT


@dataclass(frozen=True)
class IntentRef:
    intent_name: str
    intent_version: str


@dataclass
class IntentDefinition:
    """
    Intent nuevo a crear con PutIntent.

    El tipo de fulfillment está fijo en "ReturnIntent": Lex devuelve el intent
    reconocido al cliente en lugar de invocar una Lambda.
    """

    name: str
    conclusion_messages: List[Message] = field(default_factory=list)
    sample_utterances: List[str] = field(default_factory=list)
    fulfillment_type: str = RETURN_INTENT


@dataclass
class BotDefinition:
    """
    Definición de un bot en Lex.

    Attributes:
        name:
            Identificador único del bot dentro de la cuenta.
        locale:
            Código de locale (ej: "en-US").
        child_directed:
            Flag COPPA exigido por Lex.
        abort_messages / clarification_messages:
            Listas ordenadas de mensajes de texto plano.
        intents:
            Intents asociados al bot, en el orden en que se envían a Lex.
        checksum:
            Token opaco de concurrencia optimista. None para bots nuevos.
            Para actualizar un bot existente debe ser el de la última lectura.
        version:
            Versión reportada por Lex (solo lectura, informativa).
    """

    name: str
    locale: str
    child_directed: bool
    abort_messages: List[Message] = field(default_factory=list)
    clarification_messages: List[Message] = field(default_factory=list)
    intents: List[IntentRef] = field(default_factory=list)
    checksum: Optional[str] = None
    version: Optional[str] = None


@dataclass
class CreateBotCommand:
    name: str
    locale: str
    child_directed: bool
    abort_messages: List[str] = field(default_factory=list)
    clarification_prompts: List[str] = field(default_factory=list)


@dataclass
class UpdateBotCommand:
    # locale y child_directed se aceptan pero se reenvían los valores leídos de Lex
    name: str
    intent_name: str
    version: str = LATEST_VERSION
    locale: str = ""
    child_directed: bool = False
    messages: List[str] = field(default_factory=list)
    utterances: List[str] = field(default_factory=list)
    abort_messages: List[str] = field(default_factory=list)
    clarification_prompts: List[str] = field(default_factory=list)


def plain_text_messages(contents: Sequence[str]) -> List[Message]:
    """Envuelve cada string como `Message` de texto plano, preservando el orden."""
    return [Message(content=content) for content in contents]
