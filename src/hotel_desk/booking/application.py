"""
Прикладной слой контекста бронирования.

Содержит сервисы приложения, которые координируют номерной фонд,
реестр клиентов и каталог услуг при индивидуальном и групповом
бронировании.
"""

from typing import AbstractSet, List, Optional, Set, Tuple

from pydantic import BaseModel, Field

from ..inventory.domain import RoomInventory
from ..loyalty.domain import ClientLedger
from ..services.domain import ServiceCatalog
from ..shared_kernel import (
    AlreadyOccupiedError,
    ConsoleLogger,
    DomainException,
    IEventBus,
    ILogger,
    Money,
    NotFoundError,
    RetryLimitExceededError,
    UnknownServiceError,
)
from . import interfaces as ports
from .domain import Booking, BookingSummary

# DTO для входящих данных


class BookRoomRequest(BaseModel):
    """Запрос на бронирование одного номера."""

    room_number: str
    nights: int = Field(..., gt=0)
    client_name: str = ""  # Пустое имя - анонимный гость
    services: List[int] = Field(default_factory=list)
    discount_percent: float = Field(0, ge=0, le=100)


# DTO для исходящих данных


class BookingResult(BaseModel):
    """Результат оформления бронирования."""

    summary: BookingSummary
    rejected_services: List[int] = Field(default_factory=list)


class GroupBookingResult(BaseModel):
    """Результат группового бронирования."""

    bookings: List[BookingResult]
    total: Money


# Сервисы приложения


class BookingApplicationService:
    """Сервис приложения для индивидуального бронирования."""

    def __init__(
        self,
        inventory: RoomInventory,
        ledger: ClientLedger,
        catalog: ServiceCatalog,
        event_bus: Optional[IEventBus] = None,
        logger: Optional[ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._inventory = inventory
        self._ledger = ledger
        self._catalog = catalog
        self._event_bus = event_bus
        self._logger = logger or ConsoleLogger("hotel_desk.booking")

    @property
    def inventory(self) -> RoomInventory:
        return self._inventory

    @property
    def logger(self) -> ILogger:
        return self._logger

    def book_room(self, request: BookRoomRequest) -> BookingResult:
        """Бронирует номер, добавляет услуги и заселяет гостя."""
        try:
            booking, rejected = self.prepare_booking(request)
            self.complete_booking(booking)
            return BookingResult(summary=booking.describe(), rejected_services=rejected)

        except Exception as e:
            self._logger.error(f"Ошибка при бронировании номера: {str(e)}")
            raise

    def prepare_booking(
        self,
        request: BookRoomRequest,
        unavailable: AbstractSet[str] = frozenset(),
    ) -> Tuple[Booking, List[int]]:
        """Создает открытое бронирование без заселения номера.

        Номера из ``unavailable`` считаются занятыми.
        Возвращает бронирование и список отклоненных кодов услуг.
        """
        room = self._inventory.get(request.room_number)
        if not self._inventory.is_available(room.number) or room.number in unavailable:
            raise AlreadyOccupiedError(room.number)

        client = self._ledger.get_or_create(request.client_name)
        booking = Booking.create(
            room=room,
            nights=request.nights,
            occupancy_rate=self._inventory.occupancy_rate(),
            ledger=self._ledger,
            client=client,
        )

        rejected: List[int] = []
        for code in request.services:
            try:
                booking.add_service(code, self._catalog)
            except UnknownServiceError as e:
                self._logger.warning(str(e), booking=str(booking.id), code=code)
                rejected.append(code)

        if request.discount_percent:
            booking.apply_discount(request.discount_percent)

        if client is not None:
            self._publish(client.pull_domain_events())
        self._logger.info(
            "Booking prepared",
            room=booking.room_number,
            nights=booking.nights,
            occupancy=booking.occupancy_rate,
            client=client.name if client else None,
        )
        return booking, rejected

    def complete_booking(self, booking: Booking) -> None:
        """Заселяет номер и завершает оформление бронирования."""
        self._inventory.check_in(booking.room_number)
        booking.finalize()
        self._publish(booking.pull_domain_events())
        self._publish(self._inventory.pull_domain_events())
        self._logger.info(
            "Booking completed",
            room=booking.room_number,
            total=booking.calculate_total().amount,
        )

    def _publish(self, events) -> None:
        if self._event_bus:
            for event in events:
                self._event_bus.publish(event)


class GroupBookingCoordinator:
    """Групповое бронирование: несколько номеров за одну операцию.

    Доступность проверяется для каждого места отдельно, с учетом
    номеров, уже выбранных ранее в этой же группе. Номера заселяются
    только после того, как собраны все бронирования группы.
    """

    DEFAULT_MAX_ATTEMPTS = 3

    def __init__(
        self,
        booking_service: BookingApplicationService,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        logger: Optional[ILogger] = None,
    ):
        if max_attempts < 1:
            raise ValueError("Количество попыток должно быть положительным")
        self._booking_service = booking_service
        self._max_attempts = max_attempts
        self._logger = logger or booking_service.logger

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def book_group(self, count: int, source: ports.IGroupSlotSource) -> GroupBookingResult:
        """Бронирует ``count`` номеров, запрашивая данные у ``source``.

        Если выбранный номер недоступен, номер для того же места
        запрашивается повторно, не более ``max_attempts`` раз.
        """
        if count <= 0:
            raise ValueError("Количество номеров должно быть положительным")

        try:
            requests: List[BookRoomRequest] = []
            claimed: Set[str] = set()

            # Сначала собираются все места: при отказе баллы не начисляются
            for slot in range(count):
                room_number = self._choose_room(slot, source, claimed)
                requests.append(source.slot_request(slot, room_number))
                claimed.add(room_number)

            prepared: List[Tuple[Booking, List[int]]] = [
                self._booking_service.prepare_booking(request) for request in requests
            ]

            total = Money.zero(prepared[0][0].base_rate.currency)
            for booking, _ in prepared:
                total = total + booking.calculate_total()

            results = []
            for booking, rejected in prepared:
                self._booking_service.complete_booking(booking)
                results.append(
                    BookingResult(summary=booking.describe(), rejected_services=rejected)
                )

        except Exception as e:
            self._logger.error(f"Ошибка при групповом бронировании: {str(e)}")
            raise

        self._logger.info(
            "Group booking completed",
            rooms=[booking.room_number for booking, _ in prepared],
            total=total.amount,
        )
        return GroupBookingResult(bookings=results, total=total)

    def _choose_room(
        self, slot: int, source: ports.IGroupSlotSource, claimed: AbstractSet[str]
    ) -> str:
        inventory = self._booking_service.inventory
        for attempt in range(self._max_attempts):
            room_number = source.choose_room(slot, attempt)
            error: DomainException
            if room_number not in inventory:
                error = NotFoundError(room_number)
            elif not inventory.is_available(room_number) or room_number in claimed:
                error = AlreadyOccupiedError(room_number)
            else:
                return room_number

            self._logger.warning(
                f"Slot {slot + 1} rejected", room=room_number, error=str(error)
            )
            source.room_rejected(slot, error)

        raise RetryLimitExceededError(slot + 1, self._max_attempts)
