"""
Консольное меню стойки администратора.

Тонкая оболочка над сервисами приложения: читает ввод оператора,
передает уже разобранные значения в сервисы и печатает результат.
"""
import sys
from typing import Any, Callable, Dict, List, Optional, TextIO

from .booking import BookingResult, BookRoomRequest
from .bootstrap import bootstrap_app
from .config import load_settings
from .inventory import RoomDTO
from .shared_kernel import (
    AlreadyOccupiedError,
    DomainException,
    InvalidMenuChoiceError,
    NoOccupiedRoomsError,
    setup_logging,
)

MENU = (
    "Меню:\n"
    "1. Посмотреть свободные номера\n"
    "2. Индивидуальное бронирование\n"
    "3. Групповое бронирование\n"
    "4. Выселение постояльца\n"
    "0. Выход"
)


def parse_service_codes(line: str) -> List[int]:
    """Коды услуг через пробел; ввод заканчивается нулем или нечисловым значением."""
    codes = []
    for token in line.split():
        try:
            code = int(token)
        except ValueError:
            break
        if code == 0:
            break
        codes.append(code)
    return codes


class HotelShell:
    """Цикл меню. Ввод и вывод подменяются в тестах."""

    def __init__(
        self,
        app: Dict[str, Any],
        input_func: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ):
        self._app = app
        self._input = input_func
        self._out = out or sys.stdout
        self._handlers = {
            1: self.show_available_rooms,
            2: self.individual_booking,
            3: self.group_booking,
            4: self.release_room,
        }

    def echo(self, text: str = "") -> None:
        print(text, file=self._out)

    def ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def ask_int(self, prompt: str, minimum: int = 1) -> int:
        while True:
            raw = self.ask(prompt)
            try:
                value = int(raw)
            except ValueError:
                self.echo("Введите целое число.")
                continue
            if value < minimum:
                self.echo(f"Значение должно быть не меньше {minimum}.")
                continue
            return value

    def run(self) -> int:
        """Основной цикл. Возвращает код завершения."""
        room_service = self._app["room_service"]
        while True:
            self.echo(f"Текущая загруженность отеля: {room_service.occupancy():.2f}%")
            self.echo(MENU)
            try:
                raw = self.ask("Ваш выбор: ")
            except EOFError:
                return 0

            try:
                choice = int(raw)
            except ValueError:
                choice = None
            if choice == 0:
                return 0

            try:
                handler = self._handlers.get(choice)
                if handler is None:
                    raise InvalidMenuChoiceError(raw)
                handler()
            except DomainException as e:
                self.echo(str(e))
            except EOFError:
                return 0

    # Пункты меню

    def _print_rooms(self, title: str, rooms: List[RoomDTO]) -> None:
        self.echo(title)
        for room in rooms:
            self.echo(
                f"Номер: {room.number} Тип: {room.room_class} "
                f"Цена за ночь: {room.rate:.2f} {room.currency}"
            )

    def show_available_rooms(self) -> None:
        self._print_rooms(
            "Свободные номера:", self._app["room_service"].list_available_rooms()
        )

    def _print_services_menu(self) -> None:
        self.echo("Дополнительные услуги (0 - завершить выбор):")
        for code, label, price in self._app["catalog"].menu():
            self.echo(f"{code}. {label} - {price}")

    def ask_booking_details(self, room_number: str) -> BookRoomRequest:
        nights = self.ask_int("Введите количество ночей: ")
        client_name = self.ask(
            "Введите имя клиента (или оставьте пустым для анонимного клиента): "
        )
        self._print_services_menu()
        services = parse_service_codes(self.ask("Введите номера услуг через пробел: "))
        return BookRoomRequest(
            room_number=room_number,
            nights=nights,
            client_name=client_name,
            services=services,
        )

    def _print_result(self, result: BookingResult) -> None:
        for code in result.rejected_services:
            self.echo(f"Неизвестная услуга: {code}")
        self.echo(result.summary.render())

    def individual_booking(self) -> None:
        self.show_available_rooms()
        room_number = self.ask("Введите номер комнаты: ")
        inventory = self._app["inventory"]
        if not inventory.is_available(room_number):
            inventory.get(room_number)  # NotFoundError для неизвестного номера
            raise AlreadyOccupiedError(room_number)

        request = self.ask_booking_details(room_number)
        result = self._app["booking_service"].book_room(request)
        self._print_result(result)

    def group_booking(self) -> None:
        self.show_available_rooms()
        count = self.ask_int("Введите количество номеров для бронирования: ")
        result = self._app["group_coordinator"].book_group(count, _ShellSlotSource(self))

        self.echo(f"Общая стоимость для группы бронирований: {result.total}")
        for booking in result.bookings:
            self._print_result(booking)

    def release_room(self) -> None:
        room_service = self._app["room_service"]
        occupied = room_service.list_occupied_rooms()
        if not occupied:
            raise NoOccupiedRoomsError()

        self._print_rooms("Занятые номера:", occupied)
        room_number = self.ask("Введите номер комнаты, которую хотите освободить: ")
        room_service.release_room(room_number)
        self.echo(f"Номер {room_number} успешно освобожден.")


class _ShellSlotSource:
    """Запрашивает данные мест группового бронирования у оператора."""

    def __init__(self, shell: HotelShell):
        self._shell = shell

    def choose_room(self, slot: int, attempt: int) -> str:
        return self._shell.ask(f"Введите номер комнаты для бронирования {slot + 1}: ")

    def slot_request(self, slot: int, room_number: str) -> BookRoomRequest:
        return self._shell.ask_booking_details(room_number)

    def room_rejected(self, slot: int, error: DomainException) -> None:
        self._shell.echo(str(error))


def main() -> int:
    settings = load_settings()
    setup_logging(settings.log_level)
    shell = HotelShell(bootstrap_app(settings))
    return shell.run()


if __name__ == "__main__":
    sys.exit(main())
