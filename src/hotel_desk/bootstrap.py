from typing import Any, Dict, Optional

from .booking import BookingApplicationService, GroupBookingCoordinator
from .config import HotelSettings
from .inventory import RoomApplicationService, build_inventory
from .loyalty import ClientLedger, InMemoryClientRepository
from .services import ServiceCatalog
from .shared_kernel import ConsoleLogger, DomainEvent, ILogger, InMemoryEventBus


def audit_event(event: DomainEvent, logger: ILogger) -> None:
    """Записывает доменное событие в журнал."""
    logger.info(
        f"Event: {event.event_type}",
        event=event.model_dump(exclude={"event_id", "occurred_on"}),
    )


def bootstrap_app(settings: Optional[HotelSettings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or HotelSettings()

    # 1. Шина событий и журнал аудита
    audit_logger = ConsoleLogger("hotel_desk.audit")
    event_bus = InMemoryEventBus()
    event_bus.subscribe(DomainEvent, lambda event: audit_event(event, audit_logger))

    # 2. Состояние сессии: номерной фонд, реестр клиентов, каталог услуг
    inventory = build_inventory(
        (room.as_tuple() for room in settings.rooms), currency=settings.currency
    )
    ledger = ClientLedger(InMemoryClientRepository())
    catalog = ServiceCatalog(currency=settings.currency)

    # 3. Сервисы приложения получают зависимости явно
    booking_service = BookingApplicationService(
        inventory=inventory, ledger=ledger, catalog=catalog, event_bus=event_bus
    )
    group_coordinator = GroupBookingCoordinator(
        booking_service, max_attempts=settings.group_max_attempts
    )
    room_service = RoomApplicationService(inventory, event_bus=event_bus)

    return {
        "settings": settings,
        "event_bus": event_bus,
        "inventory": inventory,
        "ledger": ledger,
        "catalog": catalog,
        "booking_service": booking_service,
        "group_coordinator": group_coordinator,
        "room_service": room_service,
    }
