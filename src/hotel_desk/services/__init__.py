"""
Контекст дополнительных услуг (Service Catalog).

Отвечает за прайс-лист услуг, которые гость может
добавить к бронированию: питание, сауна, бассейн, прачечная.
"""

from .domain import SERVICE_LABELS, ServiceCatalog, ServiceKind

__all__ = [
    "ServiceKind",
    "ServiceCatalog",
    "SERVICE_LABELS",
]
