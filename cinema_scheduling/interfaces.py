"""
Интерфейсы (порты) контекста планирования залов.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, List, Protocol

from .domain.master_data import Movie, Room
from .domain.room_event import BaseRoomEvent
from .domain.shared import EntityId


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IRoomRepository(Protocol):
    """Интерфейс репозитория залов."""

    def save(self, room: Room) -> Room: ...
    def get_room(self, room_id: EntityId) -> Room: ...
    def delete_all(self) -> None: ...


class IMovieRepository(Protocol):
    """Интерфейс репозитория фильмов."""

    def save(self, movie: Movie) -> Movie: ...
    def get_movie(self, movie_id: EntityId) -> Movie: ...
    def delete_all(self) -> None: ...


class IRoomEventRepository(Protocol):
    """Интерфейс хранилища событий зала."""

    def save(self, event: BaseRoomEvent) -> BaseRoomEvent: ...
    def remove(self, event_id: EntityId) -> None: ...
    def get_by_room_on_day(self, room_id: EntityId, day: date) -> List[BaseRoomEvent]: ...
    def get_all_for_days(self, days: Iterable[date]) -> List[BaseRoomEvent]: ...
    def delete_all(self) -> None: ...
