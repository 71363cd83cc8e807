#!/usr/bin/env python3
"""
Script de verificación de credenciales y conectividad con Lex.

Ejecutar: python tools/check_lex.py
"""

import sys
from pathlib import Path

from botocore.exceptions import BotoCoreError, ClientError

# Agregar raíz del proyecto al path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bot_builder_core.config import ConfigurationError, ensure_aws_credentials, get_settings  # noqa: E402
from bot_builder_core.lex_client import get_client  # noqa: E402

print("🔍 Cargando .env…")
try:
    settings = ensure_aws_credentials(get_settings())
except ConfigurationError as e:
    print(f"❌ {e}")
    sys.exit(1)

print(f"✅ Credenciales encontradas (no las muestro por seguridad), región: {settings.aws_region}")

print("🔌 Probando conexión con Lex…")
client = get_client(settings)

try:
    bots = client.get_bots(maxResults=5).get("bots", [])
    print("✅ Conexión exitosa!")
    print("📦 Bots en la cuenta (primeros 5):")
    for bot in bots:
        print(f" - {bot.get('name')} ({bot.get('status')})")
except (ClientError, BotoCoreError) as e:
    print("❌ Error al conectarse a Lex:")
    print(e)
    sys.exit(1)
