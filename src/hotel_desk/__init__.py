"""
Стойка администратора отеля.

Номерной фонд и загруженность, бонусная программа клиентов,
дополнительные услуги и расчет стоимости бронирования.
"""

__version__ = "0.1.0"
