"""
Resultado discriminado de los workflows del engine.

Los workflows no lanzan excepciones hacia la capa HTTP: devuelven un
`OperationResult` que es éxito (con mensaje) o error (con el mensaje de Lex tal cual).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class OperationResult:
    message: Optional[str] = None
    error: Optional[str] = None
    value: Any = None

    @classmethod
    def success(cls, message: str, value: Any = None) -> "OperationResult":
        return cls(message=message, value=value)

    @classmethod
    def failure(cls, error: str) -> "OperationResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
