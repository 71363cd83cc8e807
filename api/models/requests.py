"""
Modelos de request/response para la API.

Los campos tienen defaults "vacíos" (string vacío, False, lista vacía): un body
con campos faltantes o en null se acepta y cualquier valor inválido lo termina
rechazando Lex. Solo un JSON mal formado o con tipos incorrectos da 400.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from bot_builder_core.domain_models import LATEST_VERSION, CreateBotCommand, UpdateBotCommand


class BindingModel(BaseModel):
    """Base de los bodies: un campo en null toma su valor por defecto."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class CreateBotRequest(BindingModel):
    """Request para crear un bot nuevo (POST /)."""

    name: str = Field(default="", description="Nombre único del bot en la cuenta")
    child_directed: bool = Field(default=False, description="Bot dirigido a menores (COPPA)")
    locale: str = Field(default="", description="Locale del bot (ej: en-US)")
    abort_messages: List[str] = Field(default_factory=list, description="Mensajes de abort")
    clarification_prompts: List[str] = Field(
        default_factory=list,
        description="Prompts de clarificación",
    )

    def to_command(self) -> CreateBotCommand:
        return CreateBotCommand(
            name=self.name,
            locale=self.locale,
            child_directed=self.child_directed,
            abort_messages=list(self.abort_messages),
            clarification_prompts=list(self.clarification_prompts),
        )


class UpdateBotRequest(BindingModel):
    """Request para agregar un intent a un bot existente (PUT /)."""

    name: str = Field(default="", description="Nombre del bot a actualizar")
    child_directed: bool = Field(default=False, description="Se ignora: se usa el valor actual del bot")
    locale: str = Field(default="", description="Se ignora: se usa el valor actual del bot")
    messages: List[str] = Field(default_factory=list, description="Mensajes de conclusión del intent")
    utterances: List[str] = Field(default_factory=list, description="Utterances de ejemplo del intent")
    intent_name: str = Field(default="", description="Nombre del intent nuevo")
    abort_messages: List[str] = Field(default_factory=list, description="Reemplazan los mensajes de abort")
    clarification_prompts: List[str] = Field(
        default_factory=list,
        description="Reemplazan los prompts de clarificación",
    )
    version: str = Field(
        default=LATEST_VERSION,
        description="Versión o alias del bot a leer (default: $LATEST)",
    )

    def to_command(self) -> UpdateBotCommand:
        return UpdateBotCommand(
            name=self.name,
            intent_name=self.intent_name,
            version=self.version or LATEST_VERSION,
            locale=self.locale,
            child_directed=self.child_directed,
            messages=list(self.messages),
            utterances=list(self.utterances),
            abort_messages=list(self.abort_messages),
            clarification_prompts=list(self.clarification_prompts),
        )


class BotResponse(BaseModel):
    """Envelope de respuesta común a todos los endpoints de bots."""

    error: Optional[str] = Field(default=None, description="Mensaje de error, o null si salió bien")
    message: str = Field(..., description="Resumen legible del resultado")
