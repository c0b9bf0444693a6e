"""
Инфраструктурный слой номерного фонда: начальное наполнение.
"""
from typing import Iterable, List, Tuple

from ..shared_kernel import DEFAULT_CURRENCY, Money, RoomClass
from .domain import Room, RoomInventory

# (номер, класс, цена за ночь)
DEFAULT_ROOMS: List[Tuple[str, RoomClass, float]] = [
    ("101", RoomClass.SINGLE, 1000.0),
    ("102", RoomClass.DOUBLE, 1500.0),
    ("201", RoomClass.SUITE, 3000.0),
    ("202", RoomClass.SUITE, 3200.0),
    ("301", RoomClass.SINGLE, 1100.0),
    ("302", RoomClass.DOUBLE, 1600.0),
    ("303", RoomClass.SUITE, 3500.0),
    ("401", RoomClass.SINGLE, 1200.0),
    ("402", RoomClass.DOUBLE, 1700.0),
    ("403", RoomClass.SUITE, 3800.0),
    ("501", RoomClass.SINGLE, 1300.0),
    ("502", RoomClass.DOUBLE, 1800.0),
    ("503", RoomClass.SUITE, 4000.0),
]


def build_inventory(
    rooms: Iterable[Tuple[str, RoomClass, float]] = DEFAULT_ROOMS,
    currency: str = DEFAULT_CURRENCY,
) -> RoomInventory:
    """Создает номерной фонд из описаний номеров."""
    return RoomInventory(
        Room(
            number=number,
            room_class=room_class,
            base_rate=Money(amount=rate, currency=currency),
        )
        for number, room_class, rate in rooms
    )
