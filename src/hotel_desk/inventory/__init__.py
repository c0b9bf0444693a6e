"""
Модуль контекста номерного фонда (Inventory Context).

Отвечает за каталог номеров и их занятость, включая:
- Просмотр свободных номеров
- Заселение и освобождение номеров
- Расчет загруженности отеля
"""

from .application import RoomApplicationService, RoomDTO
from .domain import Room, RoomCheckedIn, RoomCheckedOut, RoomInventory
from .infrastructure import DEFAULT_ROOMS, build_inventory

__all__ = [
    "Room",
    "RoomInventory",
    "RoomCheckedIn",
    "RoomCheckedOut",
    "RoomDTO",
    "RoomApplicationService",
    "DEFAULT_ROOMS",
    "build_inventory",
]
