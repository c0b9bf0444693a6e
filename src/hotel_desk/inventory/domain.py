"""
Доменная модель контекста номерного фонда.

Содержит номера отеля, флаги занятости и расчет
процента загруженности.
"""

from typing import Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field

from ..shared_kernel import DomainEvent, Money, NotFoundError, RoomClass


class Room(BaseModel):
    """Номер в отеле. Цена за ночь неизменна."""

    model_config = ConfigDict(frozen=True)

    number: str = Field(..., min_length=1)  # Номер комнаты (например, "101")
    room_class: RoomClass
    base_rate: Money


class RoomCheckedIn(DomainEvent):
    """Событие заселения номера."""

    room_number: str


class RoomCheckedOut(DomainEvent):
    """Событие освобождения номера."""

    room_number: str


class RoomInventory:
    """Номерной фонд и состояние занятости номеров.

    Заселение и выселение не проверяют текущее состояние:
    вызывающая сторона сама проверяет ``is_available``.
    """

    def __init__(self, rooms: Iterable[Room]):
        self._rooms: Dict[str, Room] = {}
        for room in rooms:
            if room.number in self._rooms:
                raise ValueError(f"Номер {room.number} указан дважды")
            self._rooms[room.number] = room
        self._occupied: Dict[str, bool] = {number: False for number in self._rooms}
        self._domain_events: List[DomainEvent] = []

    def __contains__(self, room_number: object) -> bool:
        return room_number in self._rooms

    def rooms(self) -> List[Room]:
        return list(self._rooms.values())

    def get(self, room_number: str) -> Room:
        try:
            return self._rooms[room_number]
        except KeyError:
            raise NotFoundError(room_number) from None

    def rate_of(self, room_number: str) -> Money:
        """Базовая цена номера за ночь."""
        return self.get(room_number).base_rate

    def list_available(self) -> List[Room]:
        return [room for room in self._rooms.values() if not self._occupied[room.number]]

    def list_occupied(self) -> List[Room]:
        return [room for room in self._rooms.values() if self._occupied[room.number]]

    def is_available(self, room_number: str) -> bool:
        """Номер существует и свободен."""
        return room_number in self._rooms and not self._occupied[room_number]

    def check_in(self, room_number: str) -> None:
        """Помечает номер как занятый."""
        self.get(room_number)
        self._occupied[room_number] = True
        self._domain_events.append(RoomCheckedIn(room_number=room_number))

    def check_out(self, room_number: str) -> None:
        """Помечает номер как свободный."""
        self.get(room_number)
        self._occupied[room_number] = False
        self._domain_events.append(RoomCheckedOut(room_number=room_number))

    def occupancy_rate(self) -> float:
        """Процент занятых номеров. Для пустого фонда - 0."""
        total = len(self._rooms)
        if total == 0:
            return 0.0
        occupied = sum(1 for flag in self._occupied.values() if flag)
        return (occupied / total) * 100

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._domain_events)
        self._domain_events.clear()
        return events
