"""
Фабрики событий зала.

Событие создается только после успешной проверки правил, поэтому
невалидный объект не может появиться в системе.
"""

from datetime import datetime

from .master_data import Movie, Room
from .room_event import CleaningSlot, Show, ShowType, Unavailability, UnavailabilityReason
from .shared import EntityId, TimeRange
from .validator import RoomEventValidator


class CleaningSlotFactory:
    """Фабрика уборок."""

    def __init__(self, validator: RoomEventValidator):
        self._validator = validator

    def create(self, room_id: EntityId, time_range: TimeRange) -> CleaningSlot:
        self._validator.validate_room_availability(room_id, time_range)
        self._validator.validate_working_hours(time_range.start_time, time_range.end_time)

        return CleaningSlot(room_id=room_id, time_range=time_range)


class UnavailabilityFactory:
    """Фабрика блоков недоступности."""

    def __init__(self, validator: RoomEventValidator):
        self._validator = validator

    def create(
        self,
        room_id: EntityId,
        reason: UnavailabilityReason,
        time_range: TimeRange,
    ) -> Unavailability:
        self._validator.validate_room_availability(room_id, time_range)
        self._validator.validate_working_hours(time_range.start_time, time_range.end_time)

        return Unavailability(room_id=room_id, reason=reason, time_range=time_range)


class ShowFactory:
    """Фабрика сеансов."""

    def __init__(self, validator: RoomEventValidator):
        self._validator = validator

    def create_show(
        self,
        movie: Movie,
        room: Room,
        show_type: ShowType,
        starting_time: datetime,
    ) -> Show:
        """
        Создает сеанс фильма в зале.

        Конец сеанса вычисляется по длительности фильма. Обычный сеанс
        проверяется по общему рабочему времени, премьера по окну премьер.
        """
        time_range = TimeRange.starting_at(starting_time, movie.duration)

        self._validator.validate_room_availability(room.id, time_range)

        if show_type == ShowType.REGULAR:
            self._validator.validate_working_hours(
                time_range.start_time, time_range.end_time
            )
        elif show_type == ShowType.PREMIERE:
            self._validator.validate_premiere_working_hours(
                time_range.start_time, time_range.end_time
            )
        else:
            raise ValueError(f"Неизвестный тип сеанса: {show_type}")

        return Show(
            room_id=room.id,
            time_range=time_range,
            movie_id=movie.id,
            show_type=show_type,
            is_3d_glasses_required=movie.is_3d_glasses_required,
        )
