"""
Доменная модель контекста бронирования.

Бронирование фиксирует цену номера и загруженность отеля на момент
создания, накапливает стоимость услуг и рассчитывает итоговую цену:
надбавка за загруженность, услуги, ручная скидка и скидка клиента
применяются последовательно как множители.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, PrivateAttr

from ..inventory.domain import Room
from ..loyalty.domain import Client, ClientLedger
from ..services.domain import ServiceCatalog, ServiceKind
from ..shared_kernel import (
    BusinessRuleValidationException,
    DomainEvent,
    Money,
    RoomClass,
    now,
)


class BookingStatus(str, Enum):
    """Статусы бронирования."""

    OPEN = "open"
    FINALIZED = "finalized"


class PricingPolicy:
    """Надбавка к цене номера в зависимости от загруженности отеля.

    Загруженность округляется вниз до десятков процентов, каждая
    полная десятка дает +5% к цене за ночь.
    """

    BAND_WIDTH = 10
    SURCHARGE_PER_BAND = 0.05

    @classmethod
    def occupancy_multiplier(cls, occupancy_rate: float) -> float:
        bands = int(occupancy_rate) // cls.BAND_WIDTH
        return 1 + bands * cls.SURCHARGE_PER_BAND

    @classmethod
    def dynamic_rate(cls, base_rate: Money, occupancy_rate: float) -> Money:
        return base_rate * cls.occupancy_multiplier(occupancy_rate)


class BookingCreated(DomainEvent):
    """Событие создания бронирования."""

    booking_id: UUID
    room_number: str
    nights: int
    client_name: Optional[str] = None


class ServiceAdded(DomainEvent):
    """Событие добавления услуги к бронированию."""

    booking_id: UUID
    service: ServiceKind
    price: Money


class BookingFinalized(DomainEvent):
    """Событие завершения оформления бронирования."""

    booking_id: UUID
    room_number: str
    total: Money


class BookingSummary(BaseModel):
    """Сводка по бронированию для вывода гостю."""

    booking_id: UUID
    room_number: str
    room_class: RoomClass
    nights: int
    service_cost: Money
    total: Money
    client_name: Optional[str] = None
    client_points: Optional[int] = None

    def render(self) -> str:
        lines = [
            f"Номер: {self.room_number} ({self.room_class.value})",
            f"Количество ночей: {self.nights}",
            f"Дополнительные услуги: {self.service_cost}",
            f"Общая стоимость: {self.total}",
        ]
        if self.client_name is not None:
            lines.append(f"Имя клиента: {self.client_name}")
            lines.append(f"Бонусные баллы: {self.client_points}")
        return "\n".join(lines)


class Booking(BaseModel):
    """Бронирование номера в отеле."""

    id: UUID = Field(default_factory=uuid4)
    room_number: str
    room_class: RoomClass
    nights: int = Field(..., gt=0)
    base_rate: Money  # Снимок цены за ночь на момент бронирования
    occupancy_rate: float = Field(..., ge=0, le=100)  # Снимок загруженности, %
    client: Optional[Client] = None  # Клиентом владеет ClientLedger
    service_cost: Money = Field(default_factory=Money.zero)
    services: List[ServiceKind] = Field(default_factory=list)
    discount_percent: float = Field(0, ge=0, le=100)
    status: BookingStatus = BookingStatus.OPEN
    created_at: datetime = Field(default_factory=now)
    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    @classmethod
    def create(
        cls,
        room: Room,
        nights: int,
        occupancy_rate: float,
        ledger: ClientLedger,
        client: Optional[Client] = None,
    ) -> "Booking":
        """Создает бронирование и начисляет клиенту баллы за проживание."""
        booking = cls(
            room_number=room.number,
            room_class=room.room_class,
            nights=nights,
            base_rate=room.base_rate,
            occupancy_rate=occupancy_rate,
            client=client,
            service_cost=Money.zero(room.base_rate.currency),
        )

        # Баллы начисляются только за проживание, услуги не учитываются
        if client is not None:
            ledger.add_points(client, room.base_rate * nights)

        booking._domain_events.append(
            BookingCreated(
                booking_id=booking.id,
                room_number=booking.room_number,
                nights=booking.nights,
                client_name=client.name if client else None,
            )
        )
        return booking

    @property
    def is_open(self) -> bool:
        return self.status == BookingStatus.OPEN

    def _ensure_open(self) -> None:
        if not self.is_open:
            raise BusinessRuleValidationException(
                f"Бронирование номера {self.room_number} уже оформлено"
            )

    def add_service(
        self, service: Union[int, ServiceKind], catalog: ServiceCatalog
    ) -> Money:
        """Добавляет услугу. Неизвестная услуга не меняет стоимость."""
        self._ensure_open()
        price = catalog.price_of(service)
        kind = catalog.resolve(service)

        self.service_cost = self.service_cost + price
        self.services.append(kind)
        self._domain_events.append(
            ServiceAdded(booking_id=self.id, service=kind, price=price)
        )
        return price

    def apply_discount(self, percent: float) -> None:
        """Устанавливает ручную скидку (заменяет предыдущую)."""
        self._ensure_open()
        if not 0 <= percent <= 100:
            raise BusinessRuleValidationException(
                "Скидка должна быть в диапазоне от 0 до 100%"
            )
        self.discount_percent = percent

    @property
    def dynamic_rate(self) -> Money:
        return PricingPolicy.dynamic_rate(self.base_rate, self.occupancy_rate)

    def calculate_total(self) -> Money:
        """Итоговая стоимость с учетом загруженности, услуг и скидок."""
        subtotal = self.dynamic_rate * self.nights + self.service_cost
        total = subtotal * (1 - self.discount_percent / 100)

        client_discount = ClientLedger.discount_percent(self.client)
        return total * (1 - client_discount / 100)

    def finalize(self) -> None:
        """Завершает оформление: дальше бронирование не изменяется."""
        self._ensure_open()
        self.status = BookingStatus.FINALIZED
        self._domain_events.append(
            BookingFinalized(
                booking_id=self.id,
                room_number=self.room_number,
                total=self.calculate_total(),
            )
        )

    def describe(self) -> BookingSummary:
        return BookingSummary(
            booking_id=self.id,
            room_number=self.room_number,
            room_class=self.room_class,
            nights=self.nights,
            service_cost=self.service_cost,
            total=self.calculate_total(),
            client_name=self.client.name if self.client else None,
            client_points=self.client.bonus_points if self.client else None,
        )

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._domain_events)
        self._domain_events.clear()
        return events
