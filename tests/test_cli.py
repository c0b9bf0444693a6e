"""
Тесты для консольного меню.
"""
import io

import pytest

from hotel_desk.bootstrap import bootstrap_app
from hotel_desk.cli import HotelShell, parse_service_codes
from hotel_desk.config import HotelSettings, RoomSpec
from hotel_desk.shared_kernel import RoomClass


def scripted_input(lines):
    """Подменяет input(): отдает строки по очереди, затем EOF."""
    answers = iter(lines)

    def _input(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture
def app():
    settings = HotelSettings(
        rooms=[
            RoomSpec(number="101", room_class=RoomClass.SINGLE, rate=1000.0),
            RoomSpec(number="102", room_class=RoomClass.DOUBLE, rate=1500.0),
        ]
    )
    return bootstrap_app(settings)


def run_shell(app, lines):
    out = io.StringIO()
    code = HotelShell(app, input_func=scripted_input(lines), out=out).run()
    return code, out.getvalue()


class TestParseServiceCodes:
    """Тесты разбора строки с кодами услуг."""

    @pytest.mark.parametrize(
        "line, codes",
        [
            ("", []),
            ("1 5 8", [1, 5, 8]),
            ("1 0 5", [1]),
            ("4 99", [4, 99]),
            ("2 x 3", [2]),
        ],
    )
    def test_parse(self, line, codes):
        assert parse_service_codes(line) == codes


class TestHotelShell:
    """Тесты для HotelShell."""

    def test_exit(self, app):
        """Пункт 0 завершает работу с кодом 0."""
        code, output = run_shell(app, ["0"])

        assert code == 0
        assert "Текущая загруженность отеля: 0.00%" in output

    def test_end_of_input_exits(self, app):
        code, _ = run_shell(app, [])

        assert code == 0

    def test_invalid_choice(self, app):
        """Неверный пункт меню выводит сообщение и меню снова."""
        _, output = run_shell(app, ["7", "abc", "0"])

        assert "Неверный выбор: 7" in output
        assert "Неверный выбор: abc" in output

    def test_list_rooms(self, app):
        _, output = run_shell(app, ["1", "0"])

        assert "Номер: 101 Тип: Single Room Цена за ночь: 1000.00 RUB" in output
        assert "Номер: 102 Тип: Double Room" in output

    def test_individual_booking(self, app):
        """Индивидуальное бронирование печатает сводку и меняет загруженность."""
        _, output = run_shell(app, ["2", "101", "2", "", "5 0", "0"])

        assert "Общая стоимость: 2650.00 RUB" in output
        assert "Текущая загруженность отеля: 50.00%" in output
        assert app["inventory"].is_available("101") is False

    def test_booking_reprompts_bad_number(self, app):
        """Нечисловое количество ночей запрашивается повторно."""
        _, output = run_shell(app, ["2", "101", "две", "-1", "1", "Ann", "", "0"])

        assert "Введите целое число." in output
        assert "Имя клиента: Ann" in output
        assert "Бонусные баллы: 50" in output

    def test_booking_occupied_room(self, app):
        _, output = run_shell(
            app, ["2", "101", "1", "", "", "2", "101", "0"]
        )

        assert "Номер 101 уже занят" in output

    def test_booking_unknown_room(self, app):
        _, output = run_shell(app, ["2", "999", "0"])

        assert "Номер 999 не найден" in output

    def test_unknown_service_reported(self, app):
        _, output = run_shell(app, ["2", "101", "1", "", "99 3", "0"])

        assert "Неизвестная услуга: 99" in output
        assert "Дополнительные услуги: 400.00 RUB" in output

    def test_group_booking(self, app):
        """Групповое бронирование с повторным вводом занятого номера."""
        lines = [
            "3", "2",
            "101", "1", "", "",
            "101",
            "102", "1", "", "",
            "0",
        ]

        _, output = run_shell(app, lines)

        assert "Номер 101 уже занят" in output
        assert "Общая стоимость для группы бронирований: 2500.00 RUB" in output
        assert "Текущая загруженность отеля: 100.00%" in output

    def test_release_room(self, app):
        _, output = run_shell(app, ["2", "102", "1", "", "", "4", "102", "0"])

        assert "Занятые номера:" in output
        assert "Номер 102 успешно освобожден." in output
        assert app["inventory"].is_available("102") is True

    def test_release_without_occupied_rooms(self, app):
        _, output = run_shell(app, ["4", "0"])

        assert "Нет занятых номеров для выселения" in output

    def test_release_vacant_room(self, app):
        _, output = run_shell(app, ["2", "102", "1", "", "", "4", "101", "0"])

        assert "Номер 101 уже свободен" in output
