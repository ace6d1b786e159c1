"""
Deci Configuration — глобальная политика деления

Модуль хранит единственную изменяемую разделяемую сущность ядра:
активную DivisionPolicy, которую читает оператор деления без явного scale.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В каждый момент активна ровно одна политика
2. Политика неизменяема (frozen) и заменяется целиком — читатель никогда
   не увидит старый scale с новым режимом округления
3. Изменение видно всем последующим делениям сразу
4. Переменные окружения читаются только явно (configure_from_settings)
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.deci.log import get_logger
from src.deci.rounding import RoundingMode

logger = get_logger("config")


# =============================================================================
# МОДЕЛИ
# =============================================================================


class DivisionPolicy(BaseModel):
    """
    Scale и режим округления для оператора деления.

    fractional_digits: количество цифр справа от десятичной точки (>= 0)
    rounding_mode: режим округления при обрезке до fractional_digits
    """

    fractional_digits: int = Field(..., ge=0, description="Цифр после точки")
    rounding_mode: RoundingMode = Field(..., description="Режим округления")

    model_config = {"frozen": True}


DEFAULT_DIVISION_POLICY: Final[DivisionPolicy] = DivisionPolicy(
    fractional_digits=20,
    rounding_mode=RoundingMode.HALF_UP,
)


class DeciSettings(BaseSettings):
    """Настройки из окружения (префикс DECI_)."""

    model_config = SettingsConfigDict(env_prefix="DECI_", env_file=".env", extra="ignore")

    division_scale: int = Field(default=20, ge=0)
    division_rounding: RoundingMode = RoundingMode.HALF_UP
    logging_enabled: bool = False


# =============================================================================
# ГЛОБАЛЬНАЯ КОНФИГУРАЦИЯ
# =============================================================================


class DeciConfiguration:
    """
    Process-wide точка конфигурации Deci.

    Запись выполняется под lock; чтение — одно обращение к атрибуту
    (присваивание ссылки в CPython атомарно).
    """

    _lock = threading.Lock()
    _division_policy: DivisionPolicy = DEFAULT_DIVISION_POLICY

    logging_enabled: bool = False

    @classmethod
    def division_policy(cls) -> DivisionPolicy:
        return cls._division_policy

    @classmethod
    def set_division_policy(cls, policy: DivisionPolicy) -> DivisionPolicy:
        """
        Замена активной политики.

        Returns:
            Предыдущая политика
        """
        if not isinstance(policy, DivisionPolicy):
            raise TypeError(f"policy must be a DivisionPolicy, got {type(policy).__name__}")

        with cls._lock:
            previous = cls._division_policy
            cls._division_policy = policy

        if previous != policy:
            logger.info(
                "Division policy changed: %s/%s -> %s/%s",
                previous.fractional_digits,
                previous.rounding_mode.value,
                policy.fractional_digits,
                policy.rounding_mode.value,
            )
        return previous

    @classmethod
    def reset_division_policy(cls) -> None:
        """Восстановление политики по умолчанию {20, HALF_UP}."""
        cls.set_division_policy(DEFAULT_DIVISION_POLICY)

    @classmethod
    def disable_logging(cls) -> None:
        cls.logging_enabled = False


def get_division_policy() -> DivisionPolicy:
    """Активная политика деления."""
    return DeciConfiguration.division_policy()


def set_division_policy(policy: DivisionPolicy) -> DivisionPolicy:
    """Установка политики деления; возвращает предыдущую."""
    return DeciConfiguration.set_division_policy(policy)


def reset_division_policy() -> None:
    """Сброс политики деления к значению по умолчанию."""
    DeciConfiguration.reset_division_policy()


@contextmanager
def division_policy(
    fractional_digits: int,
    rounding_mode: RoundingMode = RoundingMode.HALF_UP,
) -> Iterator[DivisionPolicy]:
    """
    Временная политика деления на время блока with.

    Args:
        fractional_digits: Scale для оператора деления
        rounding_mode: Режим округления

    Yields:
        Установленная политика

    Examples:
        >>> with division_policy(2, RoundingMode.HALF_UP):
        ...     str(Deci("1") / Deci("3"))
        '0.33'
    """
    policy = DivisionPolicy(fractional_digits=fractional_digits, rounding_mode=rounding_mode)
    previous = set_division_policy(policy)
    try:
        yield policy
    finally:
        set_division_policy(previous)


def configure_from_settings(settings: DeciSettings | None = None) -> DivisionPolicy:
    """
    Применение настроек окружения к глобальной конфигурации.

    Args:
        settings: Готовые настройки; None → прочитать DECI_* из окружения

    Returns:
        Установленная политика деления
    """
    if settings is None:
        settings = DeciSettings()

    policy = DivisionPolicy(
        fractional_digits=settings.division_scale,
        rounding_mode=settings.division_rounding,
    )
    set_division_policy(policy)
    DeciConfiguration.logging_enabled = settings.logging_enabled
    return policy
