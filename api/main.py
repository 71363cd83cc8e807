"""
API HTTP principal para bot_builder_core.

Esta aplicación FastAPI expone dos endpoints (POST / y PUT /) que usan los
workflows de `bot_builder_core.engine` para crear y actualizar bots en Lex.

Uso:
    uvicorn api.main:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bot_builder_core.config import ensure_aws_credentials, get_settings

from .models.requests import BotResponse
from .routes import bots

API_VERSION = "0.1.0"
SERVICE_NAME = "bot-builder-api"
VALIDATION_ERROR_MESSAGE = "Validation Error."

settings = get_settings()

# Configurar logging según ambiente
log_level = getattr(logging, settings.log_level, logging.INFO)
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)
logger.info(f"Iniciando API en ambiente: {settings.environment}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Sin credenciales de AWS el servicio no arranca
    current = ensure_aws_credentials(get_settings())
    logger.info(f"Credenciales de AWS cargadas, región: {current.aws_region}")
    yield


app = FastAPI(
    title="Bot Builder API",
    description="API para crear y actualizar bots de Amazon Lex",
    version=API_VERSION,
    lifespan=lifespan,
)

cors_origins = settings.cors_origin_list()
logger.info(f"CORS origins configurados: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Body que no se puede bindear (JSON mal formado, tipos incorrectos) → 400."""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning(f"Error de validación en {request.method} {request.url.path}: {detail}")
    return JSONResponse(
        status_code=400,
        content=BotResponse(error=detail, message=VALIDATION_ERROR_MESSAGE).model_dump(),
    )


# Registrar rutas
app.include_router(bots.router)


@app.get("/health")
async def health():
    """Health check."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": API_VERSION,
    }
