"""
Модуль контекста бронирования (Booking Context).

Отвечает за оформление бронирований номеров, включая:
- Расчет цены с учетом загруженности отеля
- Добавление услуг и применение скидок
- Групповое бронирование нескольких номеров
"""

from .application import (
    BookingApplicationService,
    BookingResult,
    BookRoomRequest,
    GroupBookingCoordinator,
    GroupBookingResult,
)
from .domain import (
    Booking,
    BookingCreated,
    BookingFinalized,
    BookingStatus,
    BookingSummary,
    PricingPolicy,
    ServiceAdded,
)

__all__ = [
    "Booking",
    "BookingStatus",
    "BookingSummary",
    "PricingPolicy",
    "BookingCreated",
    "BookingFinalized",
    "ServiceAdded",
    "BookRoomRequest",
    "BookingResult",
    "GroupBookingResult",
    "BookingApplicationService",
    "GroupBookingCoordinator",
]
