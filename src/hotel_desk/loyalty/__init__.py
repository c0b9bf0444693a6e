"""
Модуль контекста лояльности (Loyalty Context).

Отвечает за учет клиентов и их бонусных баллов:
- Регистрацию клиента при первом именном бронировании
- Начисление баллов за стоимость проживания
- Расчет скидки по накопленным баллам
"""

from .domain import Client, ClientLedger, LoyaltyPointsAccrued, LoyaltyPolicy
from .infrastructure import InMemoryClientRepository

__all__ = [
    "Client",
    "ClientLedger",
    "LoyaltyPolicy",
    "LoyaltyPointsAccrued",
    "InMemoryClientRepository",
]
