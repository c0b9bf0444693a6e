"""
Инфраструктура общего ядра: логирование и шина событий в памяти.
"""
import json
import logging
import sys
from typing import Callable, Dict, List, Optional, Type

from .domain import DomainEvent
from .interfaces import ILogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Настраивает корневой логгер пакета (вывод в stderr)."""
    root = logging.getLogger("hotel_desk")
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


class ConsoleLogger(ILogger):
    """Логгер поверх модуля logging; контекст выводится как JSON."""

    def __init__(self, name: str = "hotel_desk"):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, context: dict) -> None:
        if context:
            message = f"{message} | {json.dumps(context, default=str, ensure_ascii=False)}"
        self._logger.log(level, message)

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, kwargs)


class InMemoryEventBus:
    """Реализация шины событий в памяти."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._subscribers: Dict[Type[DomainEvent], List[Callable]] = {}
        self._logger = logger or ConsoleLogger("hotel_desk.events")

    def publish(self, event: DomainEvent) -> None:
        """Публикует событие."""
        event_type = type(event)
        handlers = [
            handler
            for subscribed_type, subscribed in self._subscribers.items()
            if issubclass(event_type, subscribed_type)
            for handler in subscribed
        ]
        if not handlers:
            self._logger.debug(f"No subscribers for event type {event_type.__name__}")
            return

        self._logger.debug(f"Publishing event: {event_type.__name__}")

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    f"Error in event handler for {event_type.__name__}",
                    error=str(e),
                    event=event.model_dump(),
                )

    def subscribe(self, event_type: Type[DomainEvent], handler: Callable) -> None:
        """Подписывает обработчик на события указанного типа."""
        self._subscribers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Subscribed handler to {event_type.__name__} events")
