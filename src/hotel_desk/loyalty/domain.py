"""
Доменная модель контекста лояльности.

Клиент накапливает бонусные баллы за стоимость проживания
(но не за услуги) и получает ступенчатую скидку.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, PrivateAttr

from ..shared_kernel import DomainEvent, Money
from .interfaces import IClientRepository


class LoyaltyPolicy:
    """Правила начисления баллов и расчета скидки."""

    AMOUNT_PER_POINT = 20
    POINTS_PER_TIER = 5000
    PERCENT_PER_TIER = 5
    MAX_DISCOUNT_PERCENT = 75

    @classmethod
    def points_for(cls, amount_spent: float) -> int:
        """Один балл за каждые полные 20 единиц валюты."""
        if amount_spent < 0:
            raise ValueError("Сумма не может быть отрицательной")
        return int(amount_spent // cls.AMOUNT_PER_POINT)

    @classmethod
    def discount_for(cls, points: int) -> int:
        """5% за каждые 5000 баллов, но не более 75%."""
        discount = (points // cls.POINTS_PER_TIER) * cls.PERCENT_PER_TIER
        return min(discount, cls.MAX_DISCOUNT_PERCENT)


class LoyaltyPointsAccrued(DomainEvent):
    """Событие начисления бонусных баллов."""

    client_name: str
    points: int
    total_points: int


class Client(BaseModel):
    """Клиент отеля, участник программы лояльности."""

    name: str = Field(..., min_length=1)
    bonus_points: int = Field(0, ge=0)
    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    @property
    def discount_percent(self) -> int:
        return LoyaltyPolicy.discount_for(self.bonus_points)

    def add_points(self, points: int) -> None:
        """Начисляет баллы. Баллы только растут."""
        if points < 0:
            raise ValueError("Количество баллов не может быть отрицательным")
        self.bonus_points += points
        self._domain_events.append(
            LoyaltyPointsAccrued(
                client_name=self.name, points=points, total_points=self.bonus_points
            )
        )

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._domain_events)
        self._domain_events.clear()
        return events


class ClientLedger:
    """Реестр клиентов: владеет их жизненным циклом и баллами."""

    def __init__(self, repository: IClientRepository):
        self._repository = repository

    def get_or_create(self, name: str) -> Optional[Client]:
        """Возвращает клиента по имени; пустое имя - анонимный гость (None)."""
        if not name:
            return None
        client = self._repository.find_by_name(name)
        if client is None:
            client = Client(name=name)
            self._repository.add(client)
        return client

    def get(self, name: str) -> Optional[Client]:
        return self._repository.find_by_name(name)

    def add_points(self, client: Client, amount_spent: Money) -> int:
        """Начисляет баллы за потраченную сумму, возвращает их количество."""
        points = LoyaltyPolicy.points_for(amount_spent.amount)
        client.add_points(points)
        return points

    @staticmethod
    def discount_percent(client: Optional[Client]) -> int:
        if client is None:
            return 0
        return client.discount_percent

    def list_clients(self) -> List[Client]:
        return self._repository.list_all()
