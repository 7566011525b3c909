# src/sheetbind/core/headers/messages.py
"""
Mensagens de diagnóstico devolvidas ao chamador.

Diagnósticos de headers e de estrutura são dados, não exceções: cada um
vira um `Message` com nível, tipo e timestamp (segundos unix, UTC).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Union


class MessageLevel(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class MessageType(str, Enum):
    CHECK_SHEET = "CHECK_SHEET"
    GENERAL = "GENERAL"
    VALIDATION = "VALIDATION"


def _now() -> int:
    return int(datetime.now(timezone.utc).timestamp())


@dataclass(frozen=True)
class Message:
    message: str
    level: MessageLevel
    type: MessageType = MessageType.GENERAL
    time: int = field(default_factory=_now)

    @property
    def is_error(self) -> bool:
        return self.level is MessageLevel.ERROR

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["level"] = self.level.value
        data["type"] = self.type.value
        return data


MessageTypeLike = Union[MessageType, str]


def _create(message: str, level: MessageLevel, type: MessageTypeLike) -> Message:
    return Message(message=message, level=level, type=MessageType(type or MessageType.GENERAL))


def create_error_message(message: str, type: MessageTypeLike = MessageType.GENERAL) -> Message:
    return _create(message, MessageLevel.ERROR, type)


def create_warning_message(message: str, type: MessageTypeLike = MessageType.GENERAL) -> Message:
    return _create(message, MessageLevel.WARNING, type)


def create_info_message(message: str, type: MessageTypeLike = MessageType.GENERAL) -> Message:
    return _create(message, MessageLevel.INFO, type)
