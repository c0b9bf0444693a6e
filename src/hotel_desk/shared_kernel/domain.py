"""
Основные доменные типы и исключения общего ядра.
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CURRENCY = "RUB"


class Money(BaseModel):
    """Денежная сумма с валютой."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., ge=0, description="Сумма денег")
    currency: str = Field(
        default=DEFAULT_CURRENCY, max_length=3, description="Код валюты (ISO 4217)"
    )

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(amount=0.0, currency=currency)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError("Можно складывать только объекты Money")
        if self.currency != other.currency:
            raise ValueError("Нельзя складывать разные валюты")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, multiplier: float) -> "Money":
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, float)):
            raise TypeError("Множитель должен быть числом")
        if multiplier < 0:
            raise ValueError("Множитель не может быть отрицательным")
        return Money(amount=self.amount * multiplier, currency=self.currency)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


class RoomClass(str, Enum):
    """Классы номеров в отеле."""

    SINGLE = "Single Room"
    DOUBLE = "Double Room"
    SUITE = "Suite"


def now() -> datetime:
    """Возвращает текущую дату и время (UTC)."""
    return datetime.now(timezone.utc)


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=now)

    @property
    def event_type(self) -> str:
        return type(self).__name__


# Исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class NotFoundError(DomainException):
    """Номер с указанным идентификатором не существует."""

    def __init__(self, room_number: str):
        super().__init__(f"Номер {room_number} не найден")
        self.room_number = room_number


class RoomStateError(DomainException):
    """Операция не соответствует текущему состоянию номера."""

    def __init__(self, room_number: str, message: str):
        super().__init__(message)
        self.room_number = room_number


class AlreadyOccupiedError(RoomStateError):
    """Номер уже занят."""

    def __init__(self, room_number: str):
        super().__init__(room_number, f"Номер {room_number} уже занят")


class AlreadyVacantError(RoomStateError):
    """Номер уже свободен."""

    def __init__(self, room_number: str):
        super().__init__(room_number, f"Номер {room_number} уже свободен")


class UnknownServiceError(DomainException):
    """Неизвестный код дополнительной услуги."""

    def __init__(self, code: object):
        super().__init__(f"Неизвестная услуга: {code}")
        self.code = code


class NoOccupiedRoomsError(DomainException):
    """Нет занятых номеров для выселения."""

    def __init__(self) -> None:
        super().__init__("Нет занятых номеров для выселения")


class InvalidMenuChoiceError(DomainException):
    """Неверный пункт меню."""

    def __init__(self, choice: object):
        super().__init__(f"Неверный выбор: {choice}. Попробуйте снова")
        self.choice = choice


class RetryLimitExceededError(DomainException):
    """Исчерпано количество попыток выбора номера."""

    def __init__(self, slot: int, attempts: int):
        super().__init__(
            f"Не удалось подобрать свободный номер для места {slot} "
            f"за {attempts} попыток"
        )
        self.slot = slot
        self.attempts = attempts
