"""
Tests del cliente de Lex.

Verifica que:
1) El cliente hace un solo intento por llamada (sin reintentos)
2) Sin credenciales no se crea el cliente
3) Sin credenciales el workflow devuelve un error en lugar de lanzar
"""

import pytest
from botocore.awsrequest import AWSResponse, HeadersDict

from bot_builder_core.config import ConfigurationError, Settings
from bot_builder_core.domain_models import CreateBotCommand
from bot_builder_core.engine import BotCreator
from bot_builder_core.lex_client import get_client


class _RawBody:
    def __init__(self, body: bytes):
        self._body = body

    def stream(self, **kwargs):
        yield self._body


@pytest.fixture
def command():
    return CreateBotCommand(
        name="OrderFlowers",
        locale="en-US",
        child_directed=False,
        abort_messages=["Bye."],
        clarification_prompts=["Again?"],
    )


def test_get_client_un_solo_intento(settings):
    client = get_client(settings)

    assert client.meta.config.retries["total_max_attempts"] == 1


def test_error_500_no_se_reintenta(settings, command):
    client = get_client(settings)
    sent = []

    def _fail(request, **kwargs):
        sent.append(request.url)
        return AWSResponse(
            request.url,
            500,
            HeadersDict({"x-amzn-ErrorType": "InternalFailureException"}),
            _RawBody(b'{"message": "boom"}'),
        )

    client.meta.events.register("before-send.*.*", _fail)

    result = BotCreator(settings, client_factory=lambda _settings: client).create(command)

    assert not result.ok
    assert len(sent) == 1


def test_get_client_sin_credenciales():
    with pytest.raises(ConfigurationError):
        get_client(Settings(aws_access_key_id="", aws_secret_access_key="", aws_region=""))


def test_workflow_sin_credenciales_devuelve_error(command):
    settings = Settings(aws_access_key_id="", aws_secret_access_key="", aws_region="")

    result = BotCreator(settings).create(command)

    assert not result.ok
    assert "ACCESS_KEY_ID" in result.error
