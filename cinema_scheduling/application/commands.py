"""
Команды записи и их обработчики.

Обработчик разрешает ссылки на справочные данные (зал, фильм), вызывает
нужную фабрику и сохраняет результат. Создание сеанса всегда порождает
уборку сразу после него.
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Optional, TypeVar

from ..domain.factories import CleaningSlotFactory, ShowFactory, UnavailabilityFactory
from ..domain.room_event import ShowType, UnavailabilityReason
from ..domain.shared import EntityId, TimeRange
from ..infrastructure.logger import ConsoleLogger
from ..interfaces import ILogger, IMovieRepository, IRoomEventRepository, IRoomRepository

T_Command = TypeVar("T_Command")


class Command:
    """Маркер команды."""

    pass


class CommandHandler(Generic[T_Command], ABC):
    """Абстрактный обработчик команды."""

    @abstractmethod
    def handle(self, command: T_Command) -> None:
        raise NotImplementedError


# --- Data Transfer Objects (команды) ---


@dataclass(frozen=True)
class CreateShowCommand(Command):
    """Команда на создание сеанса."""

    movie_id: EntityId
    room_id: EntityId
    starting_date: datetime
    show_type: ShowType


@dataclass(frozen=True)
class CreateCleaningSlotCommand(Command):
    """Команда на создание уборки."""

    room_id: EntityId
    starting_time: datetime


@dataclass(frozen=True)
class CreateUnavailabilityCommand(Command):
    """Команда на создание блока недоступности."""

    reason: UnavailabilityReason
    time_range: TimeRange
    room_id: EntityId


# --- Обработчики ---


class CreateCleaningSlotCommandHandler(CommandHandler[CreateCleaningSlotCommand]):
    """Создает уборку длительностью, заданной для зала."""

    def __init__(
        self,
        room_repository: IRoomRepository,
        room_event_repository: IRoomEventRepository,
        cleaning_slot_factory: CleaningSlotFactory,
        logger: Optional[ILogger] = None,
    ):
        self._room_repository = room_repository
        self._room_event_repository = room_event_repository
        self._cleaning_slot_factory = cleaning_slot_factory
        self._logger = logger or ConsoleLogger()

    def handle(self, command: CreateCleaningSlotCommand) -> None:
        room = self._room_repository.get_room(command.room_id)

        cleaning_slot = self._cleaning_slot_factory.create(
            room_id=room.id,
            time_range=TimeRange.starting_at(command.starting_time, room.cleaning_slot),
        )

        self._room_event_repository.save(cleaning_slot)
        self._logger.info(
            "Уборка создана",
            cleaning_slot_id=cleaning_slot.id,
            room_id=room.id,
            time_range=str(cleaning_slot.time_range),
        )


class CreateUnavailabilityCommandHandler(CommandHandler[CreateUnavailabilityCommand]):
    """Создает блок недоступности зала."""

    def __init__(
        self,
        room_repository: IRoomRepository,
        room_event_repository: IRoomEventRepository,
        unavailability_factory: UnavailabilityFactory,
        logger: Optional[ILogger] = None,
    ):
        self._room_repository = room_repository
        self._room_event_repository = room_event_repository
        self._unavailability_factory = unavailability_factory
        self._logger = logger or ConsoleLogger()

    def handle(self, command: CreateUnavailabilityCommand) -> None:
        room = self._room_repository.get_room(command.room_id)

        unavailability = self._unavailability_factory.create(
            room_id=room.id,
            reason=command.reason,
            time_range=command.time_range,
        )

        self._room_event_repository.save(unavailability)
        self._logger.info(
            "Недоступность зала создана",
            unavailability_id=unavailability.id,
            room_id=room.id,
            reason=unavailability.reason,
        )


class CreateShowCommandHandler(CommandHandler[CreateShowCommand]):
    """
    Создает сеанс и уборку после него.

    Все создания сеансов во всём процессе, для любого зала,
    сериализуются одной блокировкой класса: пропускная способность
    ограничена ради простоты.

    Чтение (проверка доступности, доска) блокировку не берет и может
    увидеть сеанс до появления его уборки.

    Если уборку создать не удалось, ошибка пробрасывается вызывающему,
    а уже сохраненный сеанс по умолчанию остается в хранилище.
    С rollback_on_cleaning_failure=True сеанс удаляется перед пробросом.
    """

    _lock = threading.Lock()

    def __init__(
        self,
        show_factory: ShowFactory,
        room_event_repository: IRoomEventRepository,
        movie_repository: IMovieRepository,
        room_repository: IRoomRepository,
        create_cleaning_slot_command_handler: CreateCleaningSlotCommandHandler,
        logger: Optional[ILogger] = None,
        rollback_on_cleaning_failure: bool = False,
    ):
        self._show_factory = show_factory
        self._room_event_repository = room_event_repository
        self._movie_repository = movie_repository
        self._room_repository = room_repository
        self._create_cleaning_slot_command_handler = create_cleaning_slot_command_handler
        self._logger = logger or ConsoleLogger()
        self.rollback_on_cleaning_failure = rollback_on_cleaning_failure

    def handle(self, command: CreateShowCommand) -> None:
        with self._lock:
            movie = self._movie_repository.get_movie(command.movie_id)
            room = self._room_repository.get_room(command.room_id)

            show = self._show_factory.create_show(
                movie, room, command.show_type, command.starting_date
            )
            self._room_event_repository.save(show)
            self._logger.info(
                "Сеанс создан",
                show_id=show.id,
                room_id=room.id,
                movie_id=movie.id,
                time_range=str(show.time_range),
            )

            try:
                self._create_cleaning_slot_command_handler.handle(
                    CreateCleaningSlotCommand(room_id=room.id, starting_time=show.time_range.to)
                )
            except Exception as e:
                if self.rollback_on_cleaning_failure:
                    self._room_event_repository.remove(show.id)
                    self._logger.warning(
                        "Уборка не создана, сеанс удален",
                        show_id=show.id,
                        error=str(e),
                    )
                else:
                    self._logger.error(
                        "Уборка не создана, сеанс остался без уборки",
                        show_id=show.id,
                        error=str(e),
                    )
                raise
