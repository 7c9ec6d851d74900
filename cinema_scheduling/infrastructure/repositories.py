"""
Инфраструктурный слой: реализации репозиториев в памяти.

Коллекции в памяти заменяют будущую базу данных. Вызывающий код работает
только через фасад RoomEventRepository, поэтому разбиение по типам событий
остается внутренней деталью.
"""

from datetime import date
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from ..domain.master_data import Movie, Room
from ..domain.room_event import BaseRoomEvent, CleaningSlot, Show, Unavailability
from ..domain.shared import EntityId, MovieNotFoundException, RoomNotFoundException
from ..interfaces import ILogger, IMovieRepository, IRoomEventRepository, IRoomRepository
from .logger import ConsoleLogger

T_Event = TypeVar("T_Event", bound=BaseRoomEvent)


class InMemoryRoomRepository(IRoomRepository):
    """Реализация репозитория залов в памяти."""

    def __init__(self) -> None:
        self._rooms: Dict[EntityId, Room] = {}

    def save(self, room: Room) -> Room:
        self._rooms[room.id] = room
        return room

    def get_room(self, room_id: EntityId) -> Room:
        if room_id not in self._rooms:
            raise RoomNotFoundException(room_id)
        return self._rooms[room_id]

    def delete_all(self) -> None:
        self._rooms.clear()


class InMemoryMovieRepository(IMovieRepository):
    """Реализация репозитория фильмов в памяти."""

    def __init__(self, logger: Optional[ILogger] = None) -> None:
        self._movies: Dict[EntityId, Movie] = {}
        self._logger = logger or ConsoleLogger()

    def save(self, movie: Movie) -> Movie:
        if movie.id in self._movies:
            self._logger.warning(f"Фильм с id={movie.id} уже существует, перезаписываем!")
        self._movies[movie.id] = movie
        return movie

    def get_movie(self, movie_id: EntityId) -> Movie:
        if movie_id not in self._movies:
            raise MovieNotFoundException(movie_id)
        return self._movies[movie_id]

    def delete_all(self) -> None:
        self._movies.clear()


class InMemoryRoomEventStore(Generic[T_Event]):
    """Базовое хранилище событий одного типа."""

    def __init__(self) -> None:
        self._events: Dict[EntityId, T_Event] = {}

    def save(self, event: T_Event) -> T_Event:
        self._events[event.id] = event
        return event

    def remove(self, event_id: EntityId) -> bool:
        return self._events.pop(event_id, None) is not None

    def get_by_room_on_day(self, room_id: EntityId, day: date) -> List[T_Event]:
        return [
            event for event in self._events.values()
            if event.room_id == room_id and event.time_range.start_day == day
        ]

    def get_all_for_days(self, days: Iterable[date]) -> List[T_Event]:
        days = set(days)
        return [
            event for event in self._events.values()
            if event.time_range.start_day in days and event.time_range.end_day in days
        ]

    def delete_all(self) -> None:
        self._events.clear()


# В настоящей БД все запросы учитывали бы только type == SHOW
class InMemoryShowRepository(InMemoryRoomEventStore[Show]):
    """Хранилище сеансов."""


# В настоящей БД все запросы учитывали бы только type == CLEANING
class InMemoryCleaningSlotRepository(InMemoryRoomEventStore[CleaningSlot]):
    """Хранилище уборок."""


# В настоящей БД все запросы учитывали бы только type == UNAVAILABILITY
class InMemoryUnavailabilityRepository(InMemoryRoomEventStore[Unavailability]):
    """Хранилище блоков недоступности."""


class RoomEventRepository(IRoomEventRepository):
    """Фасад над тремя хранилищами событий зала."""

    def __init__(
        self,
        show_repository: Optional[InMemoryShowRepository] = None,
        cleaning_slot_repository: Optional[InMemoryCleaningSlotRepository] = None,
        unavailability_repository: Optional[InMemoryUnavailabilityRepository] = None,
    ):
        self.shows = show_repository or InMemoryShowRepository()
        self.cleaning_slots = cleaning_slot_repository or InMemoryCleaningSlotRepository()
        self.unavailabilities = unavailability_repository or InMemoryUnavailabilityRepository()

    @property
    def _stores(self) -> List[InMemoryRoomEventStore]:
        return [self.shows, self.cleaning_slots, self.unavailabilities]

    def save(self, event: BaseRoomEvent) -> BaseRoomEvent:
        if isinstance(event, Show):
            return self.shows.save(event)
        if isinstance(event, CleaningSlot):
            return self.cleaning_slots.save(event)
        if isinstance(event, Unavailability):
            return self.unavailabilities.save(event)
        raise TypeError(f"Неизвестный тип события зала: {type(event).__name__}")

    def remove(self, event_id: EntityId) -> None:
        for store in self._stores:
            if store.remove(event_id):
                return

    def get_by_room_on_day(self, room_id: EntityId, day: date) -> List[BaseRoomEvent]:
        events: List[BaseRoomEvent] = []
        for store in self._stores:
            events.extend(store.get_by_room_on_day(room_id, day))
        return events

    def get_all_for_days(self, days: Iterable[date]) -> List[BaseRoomEvent]:
        days = set(days)
        events: List[BaseRoomEvent] = []
        for store in self._stores:
            events.extend(store.get_all_for_days(days))
        return events

    def delete_all(self) -> None:
        for store in self._stores:
            store.delete_all()
