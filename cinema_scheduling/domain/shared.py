"""
Общие доменные типы и исключения контекста планирования залов кинотеатра.
"""

from datetime import date, datetime, time, timedelta
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

# Общие типы идентификаторов
EntityId = UUID


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid4()


class TimeRange(BaseModel):
    """
    Временной интервал [from, to).

    Предполагается, что from < to. Интервал не проверяет это сам:
    это предусловие для вызывающего кода.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: datetime = Field(..., alias="from")
    to: datetime

    @classmethod
    def starting_at(cls, start: datetime, duration: timedelta) -> "TimeRange":
        """Создает интервал заданной длительности, начинающийся в start."""
        return cls(from_=start, to=start + duration)

    @property
    def start_day(self) -> date:
        return self.from_.date()

    @property
    def end_day(self) -> date:
        return self.to.date()

    @property
    def start_time(self) -> time:
        return self.from_.time()

    @property
    def end_time(self) -> time:
        return self.to.time()

    @property
    def duration(self) -> timedelta:
        return self.to - self.from_

    def __str__(self) -> str:
        return f"[{self.from_.isoformat()}, {self.to.isoformat()})"


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class EntityNotFoundException(DomainException):
    """Базовое исключение для не найденных сущностей."""

    pass


class RoomNotFoundException(EntityNotFoundException):
    """Зал с указанным идентификатором не найден."""

    def __init__(self, room_id: EntityId):
        super().__init__(f"Зал с id={room_id} не найден!")
        self.room_id = room_id


class MovieNotFoundException(EntityNotFoundException):
    """Фильм с указанным идентификатором не найден."""

    def __init__(self, movie_id: EntityId):
        super().__init__(f"Фильм с id={movie_id} не найден!")
        self.movie_id = movie_id


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class RoomUnavailableException(BusinessRuleValidationException):
    """Зал уже занят в запрошенном интервале."""

    def __init__(self, room_id: EntityId, time_range: TimeRange):
        super().__init__(
            f"Зал с id={room_id} недоступен в интервале {time_range}!"
        )
        self.room_id = room_id
        self.time_range = time_range


class OutsideWorkingHoursException(BusinessRuleValidationException):
    """Событие выходит за рамки рабочего времени кинотеатра."""

    pass


class OutsidePremiereHoursException(BusinessRuleValidationException):
    """Премьера выходит за рамки окна премьерных показов."""

    pass
