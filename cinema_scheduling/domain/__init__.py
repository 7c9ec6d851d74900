"""
Доменная модель планирования залов кинотеатра.

Содержит события зала, правила их проверки и фабрики,
которые создают события только после успешной проверки.
"""

from .availability import RoomAvailabilityChecker
from .factories import CleaningSlotFactory, ShowFactory, UnavailabilityFactory
from .master_data import DEFAULT_CLEANING_SLOT, Movie, Room
from .room_event import (
    BaseRoomEvent,
    CleaningSlot,
    RoomEvent,
    RoomEventType,
    Show,
    ShowType,
    Unavailability,
    UnavailabilityReason,
)
from .shared import (
    BusinessRuleValidationException,
    DomainException,
    EntityId,
    EntityNotFoundException,
    MovieNotFoundException,
    OutsidePremiereHoursException,
    OutsideWorkingHoursException,
    RoomNotFoundException,
    RoomUnavailableException,
    TimeRange,
    generate_id,
)
from .validator import RoomEventValidator
from .working_hours import DEFAULT_WORKING_HOURS, WorkingHours

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    "TimeRange",
    # Справочные данные
    "Room",
    "Movie",
    "DEFAULT_CLEANING_SLOT",
    # События зала
    "BaseRoomEvent",
    "Show",
    "CleaningSlot",
    "Unavailability",
    "RoomEvent",
    # Перечисления
    "RoomEventType",
    "ShowType",
    "UnavailabilityReason",
    # Конфигурация
    "WorkingHours",
    "DEFAULT_WORKING_HOURS",
    # Сервисы и фабрики
    "RoomAvailabilityChecker",
    "RoomEventValidator",
    "CleaningSlotFactory",
    "UnavailabilityFactory",
    "ShowFactory",
    # Исключения
    "DomainException",
    "EntityNotFoundException",
    "RoomNotFoundException",
    "MovieNotFoundException",
    "BusinessRuleValidationException",
    "RoomUnavailableException",
    "OutsideWorkingHoursException",
    "OutsidePremiereHoursException",
]
