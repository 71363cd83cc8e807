from __future__ import annotations

import logging
from typing import Any, Dict

import boto3
from botocore.config import Config

from .config import Settings, ensure_aws_credentials

logger = logging.getLogger(__name__)

LEX_MODELS_SERVICE = "lex-models"

# Un solo intento: ninguna llamada a Lex se reintenta.
_CLIENT_CONFIG = Config(retries={"total_max_attempts": 1, "mode": "standard"})


def get_client(settings: Settings):
    """
    Crea un cliente boto3 de `lex-models` con las credenciales de `settings`.

    Se crea un cliente por request; las credenciales son las del proceso.
    """
    ensure_aws_credentials(settings)
    session = boto3.session.Session(
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        region_name=settings.aws_region,
    )
    return session.client(LEX_MODELS_SERVICE, config=_CLIENT_CONFIG)


def put_bot(client, request: Dict[str, Any]) -> Dict[str, Any]:
    """
    Crea o reemplaza un bot (upsert por nombre).

    Para un bot existente, `request["checksum"]` debe ser el de la última lectura.
    """
    logger.info(f"PutBot name={request.get('name')} intents={len(request.get('intents', []))}")
    return client.put_bot(**request)


def get_bot(client, request: Dict[str, Any]) -> Dict[str, Any]:
    logger.info(f"GetBot name={request.get('name')} versionOrAlias={request.get('versionOrAlias')}")
    return client.get_bot(**request)


def put_intent(client, request: Dict[str, Any]) -> Dict[str, Any]:
    logger.info(f"PutIntent name={request.get('name')}")
    return client.put_intent(**request)


def put_bot_alias(client, request: Dict[str, Any]) -> Dict[str, Any]:
    logger.info(f"PutBotAlias name={request.get('name')} botVersion={request.get('botVersion')}")
    return client.put_bot_alias(**request)
