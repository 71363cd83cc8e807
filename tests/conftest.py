"""
Fixtures compartidas.

Las llamadas a Lex se interceptan con `botocore.stub.Stubber` sobre un cliente
real de `lex-models`: no hay red, pero boto3 valida los parámetros igual que en
producción.
"""

import boto3
import pytest
from botocore.stub import Stubber

from bot_builder_core.config import Settings, get_settings


@pytest.fixture
def settings():
    return Settings(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        aws_region="us-east-1",
    )


@pytest.fixture
def lex(settings):
    """Cliente real de lex-models (sin red) + registro de operaciones llamadas."""
    session = boto3.session.Session(
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        region_name=settings.aws_region,
    )
    client = session.client("lex-models")
    client.called_operations = []

    def _record(model, **kwargs):
        client.called_operations.append(model.name)

    client.meta.events.register("provide-client-params.*.*", _record)
    return client


@pytest.fixture
def stubber(lex):
    with Stubber(lex) as stub:
        yield stub


@pytest.fixture
def client_factory(lex):
    """Factory compatible con `BotCreator`/`BotUpdater` que devuelve el cliente stubbeado."""
    return lambda _settings: lex


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
