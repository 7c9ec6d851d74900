"""
Инфраструктурный слой: хранилища в памяти и логгер.
"""

from .logger import ConsoleLogger
from .repositories import (
    InMemoryCleaningSlotRepository,
    InMemoryMovieRepository,
    InMemoryRoomRepository,
    InMemoryShowRepository,
    InMemoryUnavailabilityRepository,
    RoomEventRepository,
)

__all__ = [
    "ConsoleLogger",
    "InMemoryRoomRepository",
    "InMemoryMovieRepository",
    "InMemoryShowRepository",
    "InMemoryCleaningSlotRepository",
    "InMemoryUnavailabilityRepository",
    "RoomEventRepository",
]
