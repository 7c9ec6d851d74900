from typing import Any, Dict, Optional

from .application.commands import (
    CreateCleaningSlotCommandHandler,
    CreateShowCommandHandler,
    CreateUnavailabilityCommandHandler,
)
from .application.queries import GetCinemaBoardQueryHandler
from .domain.availability import RoomAvailabilityChecker
from .domain.factories import CleaningSlotFactory, ShowFactory, UnavailabilityFactory
from .domain.validator import RoomEventValidator
from .domain.working_hours import DEFAULT_WORKING_HOURS, WorkingHours
from .infrastructure.logger import ConsoleLogger
from .infrastructure.repositories import (
    InMemoryMovieRepository,
    InMemoryRoomRepository,
    RoomEventRepository,
)
from .interfaces import ILogger


def bootstrap_app(
    working_hours: WorkingHours = DEFAULT_WORKING_HOURS,
    logger: Optional[ILogger] = None,
    rollback_on_cleaning_failure: bool = False,
) -> Dict[str, Any]:
    """Создает и связывает все компоненты приложения."""
    logger = logger or ConsoleLogger()

    # 1. Хранилища
    room_repository = InMemoryRoomRepository()
    movie_repository = InMemoryMovieRepository(logger=logger)
    room_event_repository = RoomEventRepository()

    # 2. Доменные сервисы и фабрики
    checker = RoomAvailabilityChecker(room_event_repository, logger=logger)
    validator = RoomEventValidator(checker, working_hours)

    # 3. Обработчики команд и запросов
    create_cleaning_slot = CreateCleaningSlotCommandHandler(
        room_repository=room_repository,
        room_event_repository=room_event_repository,
        cleaning_slot_factory=CleaningSlotFactory(validator),
        logger=logger,
    )
    create_show = CreateShowCommandHandler(
        show_factory=ShowFactory(validator),
        room_event_repository=room_event_repository,
        movie_repository=movie_repository,
        room_repository=room_repository,
        create_cleaning_slot_command_handler=create_cleaning_slot,
        logger=logger,
        rollback_on_cleaning_failure=rollback_on_cleaning_failure,
    )
    create_unavailability = CreateUnavailabilityCommandHandler(
        room_repository=room_repository,
        room_event_repository=room_event_repository,
        unavailability_factory=UnavailabilityFactory(validator),
        logger=logger,
    )

    return {
        "room_repository": room_repository,
        "movie_repository": movie_repository,
        "room_event_repository": room_event_repository,
        "room_availability_checker": checker,
        "create_show": create_show,
        "create_cleaning_slot": create_cleaning_slot,
        "create_unavailability": create_unavailability,
        "get_cinema_board": GetCinemaBoardQueryHandler(room_event_repository),
    }
