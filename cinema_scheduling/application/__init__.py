"""
Прикладной слой: команды записи и запрос доски кинотеатра.
"""

from .commands import (
    Command,
    CommandHandler,
    CreateCleaningSlotCommand,
    CreateCleaningSlotCommandHandler,
    CreateShowCommand,
    CreateShowCommandHandler,
    CreateUnavailabilityCommand,
    CreateUnavailabilityCommandHandler,
)
from .queries import (
    CinemaBoard,
    CleaningSlotView,
    GetCinemaBoardQuery,
    GetCinemaBoardQueryHandler,
    RoomPlan,
    ShowView,
    UnavailabilityView,
)

__all__ = [
    "Command",
    "CommandHandler",
    "CreateShowCommand",
    "CreateShowCommandHandler",
    "CreateCleaningSlotCommand",
    "CreateCleaningSlotCommandHandler",
    "CreateUnavailabilityCommand",
    "CreateUnavailabilityCommandHandler",
    "GetCinemaBoardQuery",
    "GetCinemaBoardQueryHandler",
    "CinemaBoard",
    "RoomPlan",
    "ShowView",
    "CleaningSlotView",
    "UnavailabilityView",
]
