"""
Общие правила проверки событий зала.

Каждое правило либо молча проходит, либо выбрасывает своё исключение.
Сравнивается только время суток: событие считается лежащим в пределах
одних календарных суток.
"""

from datetime import time

from .availability import RoomAvailabilityChecker
from .shared import (
    EntityId,
    OutsidePremiereHoursException,
    OutsideWorkingHoursException,
    RoomUnavailableException,
    TimeRange,
)
from .working_hours import DEFAULT_WORKING_HOURS, WorkingHours


class RoomEventValidator:
    """Правила доступности зала и рабочего времени."""

    def __init__(
        self,
        room_availability_checker: RoomAvailabilityChecker,
        working_hours: WorkingHours = DEFAULT_WORKING_HOURS,
    ):
        self._room_availability_checker = room_availability_checker
        self.working_hours = working_hours

    def validate_room_availability(self, room_id: EntityId, time_range: TimeRange) -> None:
        if not self._room_availability_checker.is_available(room_id, time_range):
            raise RoomUnavailableException(room_id, time_range)

    def validate_working_hours(self, starting_time: time, ending_time: time) -> None:
        hours = self.working_hours
        if starting_time < hours.opened_from:
            raise OutsideWorkingHoursException(
                f"Событие зала не может начинаться раньше {hours.opened_from:%H:%M}"
            )
        if ending_time > hours.opened_to:
            raise OutsideWorkingHoursException(
                f"Событие зала не может заканчиваться позже {hours.opened_to:%H:%M}"
            )

    def validate_premiere_working_hours(self, starting_time: time, ending_time: time) -> None:
        hours = self.working_hours
        if starting_time < hours.premiere_from:
            raise OutsidePremiereHoursException(
                f"Премьера не может начинаться раньше {hours.premiere_from:%H:%M}"
            )
        if ending_time > hours.premiere_to:
            raise OutsidePremiereHoursException(
                f"Премьера не может заканчиваться позже {hours.premiere_to:%H:%M}"
            )
