"""
Общее ядро (Shared Kernel) для стойки администратора отеля.

Содержит общие типы данных, исключения и утилиты,
используемые в различных ограниченных контекстах.
"""

from .domain import (
    DEFAULT_CURRENCY,
    AlreadyOccupiedError,
    AlreadyVacantError,
    BusinessRuleValidationException,
    DomainEvent,
    # Исключения
    DomainException,
    InvalidMenuChoiceError,
    # Основные классы
    Money,
    NoOccupiedRoomsError,
    NotFoundError,
    RetryLimitExceededError,
    # Перечисления
    RoomClass,
    RoomStateError,
    UnknownServiceError,
    # Утилиты
    now,
)
from .infrastructure import ConsoleLogger, InMemoryEventBus, setup_logging
from .interfaces import IEventBus, ILogger

__all__ = [
    "DEFAULT_CURRENCY",
    # Основные классы
    "Money",
    "DomainEvent",
    # Перечисления
    "RoomClass",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "NotFoundError",
    "RoomStateError",
    "AlreadyOccupiedError",
    "AlreadyVacantError",
    "UnknownServiceError",
    "NoOccupiedRoomsError",
    "InvalidMenuChoiceError",
    "RetryLimitExceededError",
    # Порты и инфраструктура
    "ILogger",
    "IEventBus",
    "ConsoleLogger",
    "InMemoryEventBus",
    "setup_logging",
    # Утилиты
    "now",
]
