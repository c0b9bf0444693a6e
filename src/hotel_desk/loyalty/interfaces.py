"""
Интерфейсы (порты) для контекста лояльности.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol

if TYPE_CHECKING:
    from .domain import Client


class IClientRepository(Protocol):
    """Интерфейс репозитория клиентов."""

    def add(self, client: Client) -> None: ...
    def find_by_name(self, name: str) -> Optional[Client]: ...
    def list_all(self) -> List[Client]: ...
