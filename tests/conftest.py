"""
Общие фикстуры тестов Deci.
"""

import pytest

from src.deci.config import DeciConfiguration, reset_division_policy


@pytest.fixture(autouse=True)
def _isolate_global_configuration():
    """Каждый тест начинается и заканчивается с политикой по умолчанию."""
    reset_division_policy()
    DeciConfiguration.logging_enabled = False
    yield
    reset_division_policy()
    DeciConfiguration.logging_enabled = False
