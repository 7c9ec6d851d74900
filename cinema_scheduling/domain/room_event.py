"""
События зала: сеанс, уборка и недоступность.

Набор вариантов закрыт. Все три модели неизменяемы и различаются
полем event_type, по которому pydantic выбирает вариант при разборе.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .shared import EntityId, TimeRange, generate_id


class RoomEventType(str, Enum):
    """Типы событий зала."""

    SHOW = "show"
    CLEANING = "cleaning"
    UNAVAILABILITY = "unavailability"


class ShowType(str, Enum):
    """Типы сеансов."""

    REGULAR = "regular"
    PREMIERE = "premiere"


class UnavailabilityReason(str, Enum):
    """Причины недоступности зала."""

    RENT = "rent"
    PARTY = "party"


class BaseRoomEvent(BaseModel):
    """Общий контракт событий зала."""

    model_config = ConfigDict(frozen=True)

    id: EntityId = Field(default_factory=generate_id)
    room_id: EntityId
    time_range: TimeRange

    def is_time_range_overlapping_with(self, other: TimeRange) -> bool:
        """
        Проверяет, попадает ли начало или конец other строго внутрь события.

        Касание границ (other.from == to или other.to == from) пересечением
        не считается.
        """
        own = self.time_range
        return (own.from_ < other.from_ < own.to) or (own.from_ < other.to < own.to)


class Show(BaseRoomEvent):
    """Сеанс фильма."""

    event_type: Literal["show"] = RoomEventType.SHOW.value
    movie_id: EntityId
    show_type: ShowType
    # Копируется из фильма в момент создания сеанса
    is_3d_glasses_required: bool


class CleaningSlot(BaseRoomEvent):
    """Уборка зала."""

    event_type: Literal["cleaning"] = RoomEventType.CLEANING.value


class Unavailability(BaseRoomEvent):
    """Блок недоступности зала (аренда, праздник)."""

    event_type: Literal["unavailability"] = RoomEventType.UNAVAILABILITY.value
    reason: UnavailabilityReason


RoomEvent = Annotated[
    Union[Show, CleaningSlot, Unavailability], Field(discriminator="event_type")
]
