"""
Endpoints para crear y actualizar bots de Lex.

Este endpoint maneja:
- POST /: Crear un bot nuevo y publicar su alias
- PUT /: Agregar un intent nuevo a un bot existente

Los errores de validación del body (400) los maneja el handler registrado en
`api.main`. Acá solo se traduce el `OperationResult` del engine: error → 500.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from bot_builder_core.engine import BotCreator, BotUpdater
from bot_builder_core.results import OperationResult

from ..dependencies import get_bot_creator, get_bot_updater
from ..models.requests import BotResponse, CreateBotRequest, UpdateBotRequest

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server Error."

router = APIRouter(tags=["bots"])


def _to_response(result: OperationResult) -> JSONResponse:
    if not result.ok:
        return JSONResponse(
            status_code=500,
            content=BotResponse(error=result.error, message=SERVER_ERROR_MESSAGE).model_dump(),
        )
    return JSONResponse(
        status_code=200,
        content=BotResponse(error=None, message=result.message).model_dump(),
    )


@router.post("/", response_model=BotResponse)
def create_bot(
    request: CreateBotRequest,
    creator: BotCreator = Depends(get_bot_creator),
):
    """
    Crea un bot nuevo en Lex y publica un alias con el mismo nombre.

    Returns:
        200 {"error": null, "message": "New Bot Created."}

    Raises:
        400: Body inválido
        500: Falló PutBot o PutBotAlias (mensaje de Lex en `error`)
    """
    logger.info(f"Creando bot '{request.name}' (locale={request.locale})")
    return _to_response(creator.create(request.to_command()))


@router.put("/", response_model=BotResponse)
def update_bot(
    request: UpdateBotRequest,
    updater: BotUpdater = Depends(get_bot_updater),
):
    """
    Crea un intent nuevo y lo agrega a un bot existente.

    Returns:
        200 {"error": null, "message": "Bot Updated with new intent."}

    Raises:
        400: Body inválido
        500: Falló GetBot, PutIntent o PutBot (mensaje de Lex en `error`)
    """
    logger.info(f"Actualizando bot '{request.name}' con intent '{request.intent_name}'")
    return _to_response(updater.update(request.to_command()))
