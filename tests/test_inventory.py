"""
Тесты для номерного фонда.
"""
import pytest

from hotel_desk.inventory import (
    RoomApplicationService,
    RoomCheckedIn,
    RoomCheckedOut,
    RoomInventory,
    build_inventory,
)
from hotel_desk.shared_kernel import (
    AlreadyVacantError,
    NoOccupiedRoomsError,
    NotFoundError,
    RoomClass,
)


class TestRoomInventory:
    """Тесты для класса RoomInventory."""

    def test_default_catalog(self, inventory):
        """Фонд по умолчанию содержит 13 свободных номеров."""
        assert len(inventory.rooms()) == 13
        assert len(inventory.list_available()) == 13
        assert inventory.rate_of("503").amount == 4000.0
        assert inventory.get("102").room_class == RoomClass.DOUBLE

    def test_check_in_and_out_flip_availability(self, two_room_inventory):
        """После заселения номер недоступен, после выселения - доступен."""
        two_room_inventory.check_in("101")
        assert two_room_inventory.is_available("101") is False

        two_room_inventory.check_out("101")
        assert two_room_inventory.is_available("101") is True

    def test_check_in_is_idempotent(self, two_room_inventory):
        """Повторное заселение не меняет состояние."""
        two_room_inventory.check_in("101")
        two_room_inventory.check_in("101")

        assert two_room_inventory.occupancy_rate() == 50.0

    def test_unknown_room_is_not_available(self, two_room_inventory):
        """Неизвестный номер недоступен."""
        assert two_room_inventory.is_available("999") is False

    def test_rate_of_unknown_room(self, two_room_inventory):
        """Цена неизвестного номера - NotFoundError."""
        with pytest.raises(NotFoundError):
            two_room_inventory.rate_of("999")

    def test_check_in_unknown_room(self, two_room_inventory):
        """Заселить неизвестный номер нельзя."""
        with pytest.raises(NotFoundError):
            two_room_inventory.check_in("999")

    @pytest.mark.parametrize("k", range(0, 14))
    def test_occupancy_rate(self, inventory, k):
        """Загруженность после k заселений из n равна k/n*100."""
        for room in inventory.rooms()[:k]:
            inventory.check_in(room.number)

        assert inventory.occupancy_rate() == k / 13 * 100

    def test_empty_inventory_occupancy_is_zero(self):
        """Пустой фонд имеет нулевую загруженность."""
        assert RoomInventory([]).occupancy_rate() == 0.0

    def test_duplicate_room_numbers_rejected(self):
        """Номера в фонде уникальны."""
        with pytest.raises(ValueError):
            build_inventory([("101", RoomClass.SINGLE, 1.0), ("101", RoomClass.SUITE, 2.0)])

    def test_listing_splits_available_and_occupied(self, two_room_inventory):
        """Списки свободных и занятых номеров."""
        two_room_inventory.check_in("102")

        assert [room.number for room in two_room_inventory.list_available()] == ["101"]
        assert [room.number for room in two_room_inventory.list_occupied()] == ["102"]

    def test_events_recorded(self, two_room_inventory):
        """Заселение и выселение порождают события."""
        two_room_inventory.check_in("101")
        two_room_inventory.check_out("101")

        events = two_room_inventory.pull_domain_events()

        assert [type(event) for event in events] == [RoomCheckedIn, RoomCheckedOut]
        assert two_room_inventory.pull_domain_events() == []


class TestRoomApplicationService:
    """Тесты для сервиса приложения RoomApplicationService."""

    @pytest.fixture
    def room_service(self, two_room_inventory, event_bus, logger):
        return RoomApplicationService(two_room_inventory, event_bus=event_bus, logger=logger)

    def test_list_available_rooms(self, room_service):
        """Свободные номера возвращаются как DTO."""
        rooms = room_service.list_available_rooms()

        assert {room.number for room in rooms} == {"101", "102"}
        assert {room.room_class for room in rooms} == {"Single Room", "Double Room"}

    def test_release_room(self, room_service, two_room_inventory, event_bus):
        """Освобождение занятого номера."""
        # Подготовка
        released = []
        event_bus.subscribe(RoomCheckedOut, released.append)
        two_room_inventory.check_in("101")

        # Действие
        room = room_service.release_room("101")

        # Проверка
        assert room.number == "101"
        assert two_room_inventory.is_available("101")
        assert room_service.occupancy() == 0.0
        assert [event.room_number for event in released] == ["101"]

    def test_release_without_occupied_rooms(self, room_service, logger):
        """Нет занятых номеров - NoOccupiedRoomsError."""
        with pytest.raises(NoOccupiedRoomsError):
            room_service.release_room("101")

        assert logger.messages("error")

    def test_release_vacant_room(self, room_service, two_room_inventory):
        """Освободить свободный номер нельзя."""
        two_room_inventory.check_in("102")

        with pytest.raises(AlreadyVacantError):
            room_service.release_room("101")

    def test_release_unknown_room(self, room_service, two_room_inventory):
        """Освободить неизвестный номер нельзя."""
        two_room_inventory.check_in("102")

        with pytest.raises(NotFoundError):
            room_service.release_room("999")
