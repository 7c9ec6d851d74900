"""
Проверка доступности зала в заданном интервале.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..infrastructure.logger import ConsoleLogger
from .shared import EntityId, TimeRange

if TYPE_CHECKING:
    from ..interfaces import ILogger, IRoomEventRepository


class RoomAvailabilityChecker:
    """Доменный сервис: есть ли у зала пересекающиеся события."""

    def __init__(
        self,
        room_event_repository: IRoomEventRepository,
        logger: Optional[ILogger] = None,
    ):
        self._room_event_repository = room_event_repository
        self._logger = logger or ConsoleLogger()

    def is_available(self, room_id: EntityId, time_range: TimeRange) -> bool:
        # Берутся только события, начинающиеся в день начала интервала
        events = self._room_event_repository.get_by_room_on_day(
            room_id, time_range.start_day
        )

        for event in events:
            if event.is_time_range_overlapping_with(time_range):
                self._logger.debug(
                    f"Интервал {time_range} пересекается с событием {event.id}",
                    room_id=room_id,
                    event_type=event.event_type,
                )
                return False
        return True
