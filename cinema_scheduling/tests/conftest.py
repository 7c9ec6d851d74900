"""
Общие фикстуры для тестов планирования залов.
"""

from datetime import timedelta

import pytest

from cinema_scheduling.application.commands import (
    CreateCleaningSlotCommandHandler,
    CreateShowCommandHandler,
    CreateUnavailabilityCommandHandler,
)
from cinema_scheduling.domain import (
    CleaningSlotFactory,
    Movie,
    Room,
    RoomAvailabilityChecker,
    RoomEventValidator,
    ShowFactory,
    UnavailabilityFactory,
)
from cinema_scheduling.infrastructure import (
    InMemoryMovieRepository,
    InMemoryRoomRepository,
    RoomEventRepository,
)


@pytest.fixture
def room_event_repository() -> RoomEventRepository:
    """Фикстура: пустое хранилище событий зала."""
    return RoomEventRepository()


@pytest.fixture
def room_repository() -> InMemoryRoomRepository:
    return InMemoryRoomRepository()


@pytest.fixture
def movie_repository() -> InMemoryMovieRepository:
    return InMemoryMovieRepository()


@pytest.fixture
def checker(room_event_repository: RoomEventRepository) -> RoomAvailabilityChecker:
    return RoomAvailabilityChecker(room_event_repository)


@pytest.fixture
def validator(checker: RoomAvailabilityChecker) -> RoomEventValidator:
    return RoomEventValidator(checker)


@pytest.fixture
def room(room_repository: InMemoryRoomRepository) -> Room:
    """Фикстура: сохраненный зал с уборкой 15 минут."""
    return room_repository.save(Room(name="Зал 1"))


@pytest.fixture
def movie(movie_repository: InMemoryMovieRepository) -> Movie:
    """Фикстура: сохраненный фильм на 120 минут."""
    return movie_repository.save(Movie(duration=timedelta(minutes=120)))


@pytest.fixture
def create_cleaning_slot_handler(
    room_repository: InMemoryRoomRepository,
    room_event_repository: RoomEventRepository,
    validator: RoomEventValidator,
) -> CreateCleaningSlotCommandHandler:
    return CreateCleaningSlotCommandHandler(
        room_repository=room_repository,
        room_event_repository=room_event_repository,
        cleaning_slot_factory=CleaningSlotFactory(validator),
    )


@pytest.fixture
def create_show_handler(
    room_repository: InMemoryRoomRepository,
    movie_repository: InMemoryMovieRepository,
    room_event_repository: RoomEventRepository,
    validator: RoomEventValidator,
    create_cleaning_slot_handler: CreateCleaningSlotCommandHandler,
) -> CreateShowCommandHandler:
    return CreateShowCommandHandler(
        show_factory=ShowFactory(validator),
        room_event_repository=room_event_repository,
        movie_repository=movie_repository,
        room_repository=room_repository,
        create_cleaning_slot_command_handler=create_cleaning_slot_handler,
    )


@pytest.fixture
def create_unavailability_handler(
    room_repository: InMemoryRoomRepository,
    room_event_repository: RoomEventRepository,
    validator: RoomEventValidator,
) -> CreateUnavailabilityCommandHandler:
    return CreateUnavailabilityCommandHandler(
        room_repository=room_repository,
        room_event_repository=room_event_repository,
        unavailability_factory=UnavailabilityFactory(validator),
    )
