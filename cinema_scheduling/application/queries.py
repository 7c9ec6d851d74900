"""
Модель чтения: доска кинотеатра.

Запрос читает события прямо из хранилища, группирует их по залам
и упорядочивает внутри зала по времени начала.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Annotated, Dict, FrozenSet, List, Literal, Union

from pydantic import BaseModel, Field

from ..domain.room_event import (
    BaseRoomEvent,
    CleaningSlot,
    RoomEventType,
    Show,
    ShowType,
    Unavailability,
    UnavailabilityReason,
)
from ..domain.shared import EntityId, TimeRange
from ..interfaces import IRoomEventRepository

# DTO для исходящих данных


class ShowView(BaseModel):
    """Представление сеанса на доске."""

    id: EntityId
    time_range: TimeRange
    event_type: Literal["show"] = RoomEventType.SHOW.value
    movie_id: EntityId
    is_3d_glasses_required: bool
    show_type: ShowType


class CleaningSlotView(BaseModel):
    """Представление уборки на доске."""

    id: EntityId
    time_range: TimeRange
    event_type: Literal["cleaning"] = RoomEventType.CLEANING.value


class UnavailabilityView(BaseModel):
    """Представление недоступности зала на доске."""

    id: EntityId
    time_range: TimeRange
    event_type: Literal["unavailability"] = RoomEventType.UNAVAILABILITY.value
    reason: UnavailabilityReason


RoomEventView = Annotated[
    Union[ShowView, CleaningSlotView, UnavailabilityView],
    Field(discriminator="event_type"),
]


class RoomPlan(BaseModel):
    """План одного зала."""

    room_id: EntityId
    events: List[RoomEventView]


class CinemaBoard(BaseModel):
    """Доска кинотеатра: планы залов, в которых есть события."""

    board: List[RoomPlan]


@dataclass(frozen=True)
class GetCinemaBoardQuery:
    """Запрос доски на набор дней."""

    days: FrozenSet[date]

    def __post_init__(self):
        # Принимаем любой итерируемый набор дат (список, множество)
        object.__setattr__(self, "days", frozenset(self.days))


def to_view(event: BaseRoomEvent) -> RoomEventView:
    """Преобразует событие зала в его представление на доске."""
    if isinstance(event, Show):
        return ShowView(
            id=event.id,
            time_range=event.time_range,
            movie_id=event.movie_id,
            is_3d_glasses_required=event.is_3d_glasses_required,
            show_type=event.show_type,
        )
    if isinstance(event, CleaningSlot):
        return CleaningSlotView(id=event.id, time_range=event.time_range)
    if isinstance(event, Unavailability):
        return UnavailabilityView(
            id=event.id, time_range=event.time_range, reason=event.reason
        )
    raise TypeError(f"Неизвестный тип события зала: {type(event).__name__}")


class GetCinemaBoardQueryHandler:
    """Обработчик запроса доски кинотеатра."""

    def __init__(self, room_event_repository: IRoomEventRepository):
        self._room_event_repository = room_event_repository

    def handle(self, query: GetCinemaBoardQuery) -> CinemaBoard:
        events_by_room: Dict[EntityId, List[BaseRoomEvent]] = defaultdict(list)
        for event in self._room_event_repository.get_all_for_days(query.days):
            events_by_room[event.room_id].append(event)

        return CinemaBoard(
            board=[
                RoomPlan(
                    room_id=room_id,
                    events=sorted(
                        (to_view(event) for event in events),
                        key=lambda view: view.time_range.from_,
                    ),
                )
                for room_id, events in events_by_room.items()
            ]
        )
