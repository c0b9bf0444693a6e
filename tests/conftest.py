"""
Общие фикстуры для тестов.
"""
import pytest

from hotel_desk.booking import BookingApplicationService, GroupBookingCoordinator
from hotel_desk.inventory import build_inventory
from hotel_desk.loyalty import ClientLedger, InMemoryClientRepository
from hotel_desk.services import ServiceCatalog
from hotel_desk.shared_kernel import InMemoryEventBus, RoomClass


class RecordingLogger:
    """Логгер, запоминающий сообщения."""

    def __init__(self):
        self.records = []

    def _record(self, level, message, **kwargs):
        self.records.append((level, message, kwargs))

    def debug(self, message, **kwargs):
        self._record("debug", message, **kwargs)

    def info(self, message, **kwargs):
        self._record("info", message, **kwargs)

    def warning(self, message, **kwargs):
        self._record("warning", message, **kwargs)

    def error(self, message, **kwargs):
        self._record("error", message, **kwargs)

    def messages(self, level):
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def two_room_inventory():
    """Фонд из двух свободных номеров."""
    return build_inventory(
        [
            ("101", RoomClass.SINGLE, 1000.0),
            ("102", RoomClass.DOUBLE, 1500.0),
        ]
    )


@pytest.fixture
def inventory():
    """Фонд по умолчанию (13 номеров)."""
    return build_inventory()


@pytest.fixture
def ledger():
    return ClientLedger(InMemoryClientRepository())


@pytest.fixture
def catalog():
    return ServiceCatalog()


@pytest.fixture
def event_bus(logger):
    return InMemoryEventBus(logger=logger)


@pytest.fixture
def booking_service(two_room_inventory, ledger, catalog, event_bus, logger):
    return BookingApplicationService(
        inventory=two_room_inventory,
        ledger=ledger,
        catalog=catalog,
        event_bus=event_bus,
        logger=logger,
    )


@pytest.fixture
def group_coordinator(booking_service):
    return GroupBookingCoordinator(booking_service, max_attempts=3)
