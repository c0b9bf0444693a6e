"""
Настройки приложения.

Значения по умолчанию переопределяются переменными окружения
(в том числе из файла .env).
"""
import os
from typing import List, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .inventory.infrastructure import DEFAULT_ROOMS
from .shared_kernel import DEFAULT_CURRENCY, RoomClass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RoomSpec(BaseModel):
    """Описание номера для начального наполнения фонда."""

    number: str = Field(..., min_length=1)
    room_class: RoomClass
    rate: float = Field(..., ge=0)

    def as_tuple(self) -> Tuple[str, RoomClass, float]:
        return self.number, self.room_class, self.rate


def _default_rooms() -> List[RoomSpec]:
    return [
        RoomSpec(number=number, room_class=room_class, rate=rate)
        for number, room_class, rate in DEFAULT_ROOMS
    ]


class HotelSettings(BaseModel):
    """Настройки стойки администратора."""

    currency: str = Field(DEFAULT_CURRENCY, min_length=3, max_length=3)
    log_level: str = "WARNING"
    group_max_attempts: int = Field(3, ge=1)
    rooms: List[RoomSpec] = Field(default_factory=_default_rooms)

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level


def load_settings(env_file: Optional[str] = None) -> HotelSettings:
    """Читает настройки из окружения (HOTEL_*)."""
    load_dotenv(env_file)

    values = {}
    if os.getenv("HOTEL_CURRENCY"):
        values["currency"] = os.getenv("HOTEL_CURRENCY")
    if os.getenv("HOTEL_LOG_LEVEL"):
        values["log_level"] = os.getenv("HOTEL_LOG_LEVEL")
    if os.getenv("HOTEL_GROUP_MAX_ATTEMPTS"):
        values["group_max_attempts"] = os.getenv("HOTEL_GROUP_MAX_ATTEMPTS")
    return HotelSettings(**values)
