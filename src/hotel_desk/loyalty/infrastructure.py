"""
Инфраструктурный слой контекста лояльности.
"""
from typing import Dict, List, Optional

from . import interfaces as ports
from .domain import Client


class InMemoryClientRepository(ports.IClientRepository):
    """Реализация репозитория клиентов в памяти (ключ - имя как есть)."""

    def __init__(self) -> None:
        self._clients: Dict[str, Client] = {}

    def add(self, client: Client) -> None:
        if client.name in self._clients:
            raise ValueError(f"Client {client.name!r} already exists")
        self._clients[client.name] = client

    def find_by_name(self, name: str) -> Optional[Client]:
        return self._clients.get(name)

    def list_all(self) -> List[Client]:
        return list(self._clients.values())
