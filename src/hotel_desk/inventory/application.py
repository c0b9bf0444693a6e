"""
Прикладной слой номерного фонда.

Просмотр свободных и занятых номеров, загруженность отеля
и освобождение номера при выселении гостя.
"""

from typing import List, Optional

from pydantic import BaseModel

from ..shared_kernel import (
    AlreadyVacantError,
    ConsoleLogger,
    IEventBus,
    ILogger,
    NoOccupiedRoomsError,
)
from .domain import Room, RoomInventory


class RoomDTO(BaseModel):
    """DTO для представления номера."""

    number: str
    room_class: str
    rate: float
    currency: str

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        """Создает DTO из доменной модели."""
        return cls(
            number=room.number,
            room_class=room.room_class.value,
            rate=room.base_rate.amount,
            currency=room.base_rate.currency,
        )


class RoomApplicationService:
    """Сервис приложения для работы с номерами."""

    def __init__(
        self,
        inventory: RoomInventory,
        event_bus: Optional[IEventBus] = None,
        logger: Optional[ILogger] = None,
    ):
        self._inventory = inventory
        self._event_bus = event_bus
        self._logger = logger or ConsoleLogger("hotel_desk.inventory")

    def list_available_rooms(self) -> List[RoomDTO]:
        """Возвращает список свободных номеров."""
        return [RoomDTO.from_domain(room) for room in self._inventory.list_available()]

    def list_occupied_rooms(self) -> List[RoomDTO]:
        """Возвращает список занятых номеров."""
        return [RoomDTO.from_domain(room) for room in self._inventory.list_occupied()]

    def occupancy(self) -> float:
        """Текущая загруженность отеля в процентах."""
        return self._inventory.occupancy_rate()

    def release_room(self, room_number: str) -> RoomDTO:
        """Освобождает занятый номер."""
        try:
            if not self._inventory.list_occupied():
                raise NoOccupiedRoomsError()

            room = self._inventory.get(room_number)
            if self._inventory.is_available(room_number):
                raise AlreadyVacantError(room_number)

            self._inventory.check_out(room_number)
            self._publish_events()
            self._logger.info(
                "Room released",
                room=room_number,
                occupancy=self._inventory.occupancy_rate(),
            )
            return RoomDTO.from_domain(room)

        except Exception as e:
            self._logger.error(f"Ошибка при освобождении номера: {str(e)}")
            raise

    def _publish_events(self) -> None:
        events = self._inventory.pull_domain_events()
        if self._event_bus:
            for event in events:
                self._event_bus.publish(event)
