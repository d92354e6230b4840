# event_observer.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Hashable, Iterable, Protocol

logger = logging.getLogger(__name__)


class NoteEvent(str, Enum):
    """События списка заметок. str-enum: ключи совпадают со строками 'noteAdd'/'noteRemove'."""

    ADD = "noteAdd"
    REMOVE = "noteRemove"


class Listener(Protocol):
    def __call__(self, payload: Any) -> None: ...


class EventObserver:
    """
    Реестр именованных событий: событие -> упорядоченный список слушателей.

    - attach на незарегистрированное событие молча игнорируется;
    - один и тот же слушатель подключается к событию только один раз;
    - notify по неизвестному событию ничего не делает.

    Исключение одного слушателя не прерывает рассылку остальным:
    оно пишется в лог и возвращается вызывающему в списке ошибок.
    """

    def __init__(self, events: Iterable[Hashable] = ()) -> None:
        self._observers: dict[Hashable, list[Listener]] = {}
        self.register(events)

    # ===== регистрация =====
    def is_registered(self, event: Hashable) -> bool:
        return event in self._observers

    def register(self, events: Iterable[Hashable]) -> None:
        for event in events:
            if not self.is_registered(event):
                self._observers[event] = []

    def listeners(self, event: Hashable) -> list[Listener]:
        """Копия списка слушателей (пустой список для неизвестного события)."""
        return list(self._observers.get(event, []))

    # ===== подписка =====
    def attach(self, event: Hashable, listener: Listener) -> None:
        if not self.is_registered(event):
            logger.debug("attach ignored: event %r is not registered", event)
            return
        existing = self._observers[event]
        if listener not in existing:
            existing.append(listener)

    def detach(self, event: Hashable, listener: Listener) -> None:
        existing = self._observers.get(event)
        if existing and listener in existing:
            existing.remove(listener)

    # ===== рассылка =====
    def notify(self, event: Hashable, payload: Any) -> list[Exception]:
        errors: list[Exception] = []
        # снимок: подписки во время рассылки действуют со следующего notify
        for listener in self.listeners(event):
            try:
                listener(payload)
            except Exception as exc:
                logger.exception("listener %r failed on event %r", listener, event)
                errors.append(exc)
        return errors
