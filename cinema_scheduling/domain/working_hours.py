"""
Конфигурация рабочего времени кинотеатра.

Значения неизменяемы на всё время жизни процесса и передаются в валидатор
явно, поэтому в тестах можно подставить другие окна.
"""

from datetime import time

from pydantic import BaseModel, ConfigDict, model_validator


class WorkingHours(BaseModel):
    """Общее окно работы и окно премьерных показов."""

    model_config = ConfigDict(frozen=True)

    opened_from: time = time(8, 0)
    opened_to: time = time(22, 0)
    premiere_from: time = time(17, 0)
    premiere_to: time = time(21, 0)

    @model_validator(mode="after")
    def windows_are_ordered(self) -> "WorkingHours":
        if self.opened_from >= self.opened_to:
            raise ValueError("Время открытия должно быть раньше времени закрытия")
        if self.premiere_from >= self.premiere_to:
            raise ValueError("Начало окна премьер должно быть раньше его конца")
        return self


DEFAULT_WORKING_HOURS = WorkingHours()
