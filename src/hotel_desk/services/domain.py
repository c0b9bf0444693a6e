"""
Доменная модель каталога дополнительных услуг.

Каталог - фиксированный прайс-лист услуг, которые можно добавить
к бронированию. Полное питание продается пакетом со скидкой.
"""

from enum import IntEnum
from typing import Dict, List, Mapping, Optional, Tuple, Union

from ..shared_kernel import DEFAULT_CURRENCY, Money, UnknownServiceError


class ServiceKind(IntEnum):
    """Виды дополнительных услуг (значение - код в меню)."""

    BREAKFAST = 1
    LUNCH = 2
    DINNER = 3
    FULL_MEAL = 4
    SAUNA = 5
    POOL = 6
    BATH_ACCESSORIES = 7
    LAUNDRY = 8


SERVICE_LABELS: Dict[ServiceKind, str] = {
    ServiceKind.BREAKFAST: "Завтрак",
    ServiceKind.LUNCH: "Обед",
    ServiceKind.DINNER: "Ужин",
    ServiceKind.FULL_MEAL: "Полное питание (скидка 15%)",
    ServiceKind.SAUNA: "Сауна",
    ServiceKind.POOL: "Бассейн",
    ServiceKind.BATH_ACCESSORIES: "Дополнительные ванные принадлежности",
    ServiceKind.LAUNDRY: "Услуги прачечной",
}

BASE_PRICES: Dict[ServiceKind, float] = {
    ServiceKind.BREAKFAST: 300.0,
    ServiceKind.LUNCH: 500.0,
    ServiceKind.DINNER: 400.0,
    ServiceKind.SAUNA: 650.0,
    ServiceKind.POOL: 700.0,
    ServiceKind.BATH_ACCESSORIES: 340.0,
    ServiceKind.LAUNDRY: 1200.0,
}

FULL_MEAL_COMPONENTS: Tuple[ServiceKind, ...] = (
    ServiceKind.BREAKFAST,
    ServiceKind.LUNCH,
    ServiceKind.DINNER,
)
FULL_MEAL_DISCOUNT = 0.15


class ServiceCatalog:
    """Прайс-лист дополнительных услуг.

    Цена полного питания вычисляется из цен трех приемов пищи
    за вычетом пакетной скидки. Таблица цен проверяется на полноту
    при создании каталога.
    """

    def __init__(
        self,
        prices: Optional[Mapping[ServiceKind, float]] = None,
        currency: str = DEFAULT_CURRENCY,
    ):
        prices = dict(BASE_PRICES if prices is None else prices)
        if ServiceKind.FULL_MEAL not in prices:
            meals = sum(prices[kind] for kind in FULL_MEAL_COMPONENTS if kind in prices)
            prices[ServiceKind.FULL_MEAL] = meals * (1 - FULL_MEAL_DISCOUNT)

        missing = [kind.name for kind in ServiceKind if kind not in prices]
        if missing:
            raise ValueError(f"Для услуг не задана цена: {', '.join(missing)}")

        self._currency = currency
        self._prices: Dict[ServiceKind, Money] = {
            kind: Money(amount=price, currency=currency)
            for kind, price in prices.items()
        }

    @property
    def currency(self) -> str:
        return self._currency

    @staticmethod
    def resolve(code: Union[int, ServiceKind]) -> ServiceKind:
        """Преобразует код из меню в вид услуги."""
        if isinstance(code, bool):
            raise UnknownServiceError(code)
        try:
            return ServiceKind(code)
        except ValueError:
            raise UnknownServiceError(code) from None

    def price_of(self, code: Union[int, ServiceKind]) -> Money:
        """Возвращает цену услуги. Неизвестный код - UnknownServiceError."""
        return self._prices[self.resolve(code)]

    @staticmethod
    def label_of(kind: ServiceKind) -> str:
        return SERVICE_LABELS[kind]

    def menu(self) -> List[Tuple[int, str, Money]]:
        """Строки меню услуг: (код, название, цена)."""
        return [
            (kind.value, self.label_of(kind), self._prices[kind])
            for kind in ServiceKind
        ]
