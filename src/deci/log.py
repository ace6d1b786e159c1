"""
Logging — события обработки литералов

Ядро пишет в stdlib logging под корневым логгером "deci" и никогда
не устанавливает собственные handlers: вывод настраивает приложение.

События литералов (нормализация, отказ) эмитятся на уровне DEBUG и только
если DeciConfiguration.logging_enabled == True.
"""

import logging
from dataclasses import dataclass

ROOT_LOGGER_NAME = "deci"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Логгер внутри иерархии "deci".

    Args:
        name: Имя дочернего логгера (например, "parser"); None → корневой

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# =============================================================================
# СОБЫТИЯ
# =============================================================================


@dataclass(frozen=True)
class LiteralNormalizedEvent:
    """Литерал был переписан нормализатором (например, ',' → '.')."""

    raw_value: str
    normalized_value: str

    @property
    def message(self) -> str:
        return f"Normalized literal '{self.raw_value}' to '{self.normalized_value}'"


@dataclass(frozen=True)
class LiteralRejectedEvent:
    """Литерал отклонён валидацией."""

    raw_value: str
    reason: str

    @property
    def message(self) -> str:
        return f"Rejected literal '{self.raw_value}': {self.reason}"


LiteralEvent = LiteralNormalizedEvent | LiteralRejectedEvent


def log_literal_event(event: LiteralEvent, enabled: bool) -> None:
    """
    Эмиссия события литерала.

    Args:
        event: Событие
        enabled: Флаг DeciConfiguration.logging_enabled на момент вызова
    """
    if not enabled:
        return
    get_logger("parser").debug(event.message)
