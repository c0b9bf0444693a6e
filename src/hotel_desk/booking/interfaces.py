"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..shared_kernel import DomainException

if TYPE_CHECKING:
    from .application import BookRoomRequest


class IGroupSlotSource(Protocol):
    """Источник данных для мест группового бронирования (обычно - оператор)."""

    def choose_room(self, slot: int, attempt: int) -> str: ...
    def slot_request(self, slot: int, room_number: str) -> BookRoomRequest: ...
    def room_rejected(self, slot: int, error: DomainException) -> None: ...
