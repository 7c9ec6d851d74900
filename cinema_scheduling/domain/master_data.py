"""
Справочные данные, которые читает планировщик: залы и фильмы.
"""

from datetime import timedelta

from pydantic import BaseModel, Field

from .shared import EntityId, generate_id

DEFAULT_CLEANING_SLOT = timedelta(minutes=15)


class Room(BaseModel):
    """Зал кинотеатра."""

    id: EntityId = Field(default_factory=generate_id)
    name: str
    cleaning_slot: timedelta = DEFAULT_CLEANING_SLOT  # Длительность уборки после сеанса


class Movie(BaseModel):
    """Фильм из репертуара."""

    id: EntityId = Field(default_factory=generate_id)
    duration: timedelta
    is_3d_glasses_required: bool = False
