"""
Тесты проверки доступности зала.
"""

import uuid
from unittest.mock import MagicMock

import pytest

from cinema_scheduling.domain import RoomAvailabilityChecker
from cinema_scheduling.infrastructure import ConsoleLogger, RoomEventRepository
from cinema_scheduling.interfaces import ILogger
from cinema_scheduling.tests.builders import (
    DAY,
    at,
    make_cleaning_slot,
    make_range,
    make_show,
    make_unavailability,
)


def test_available_when_no_events_for_room(checker: RoomAvailabilityChecker):
    """Тест: зал без событий доступен."""
    assert checker.is_available(uuid.uuid4(), make_range(at(16), at(18)))


def test_available_when_events_do_not_overlap(
    checker: RoomAvailabilityChecker, room_event_repository: RoomEventRepository
):
    """Тест: события до и после интервала не мешают."""
    room_id = uuid.uuid4()
    room_event_repository.save(make_unavailability(at(14, 30), at(15), room_id))
    room_event_repository.save(make_unavailability(at(18, 1), at(22), room_id))

    assert checker.is_available(room_id, make_range(at(16), at(18)))


def test_events_of_other_rooms_are_ignored(
    checker: RoomAvailabilityChecker, room_event_repository: RoomEventRepository
):
    """Тест: события другого зала не влияют на доступность."""
    room_event_repository.save(make_show(at(16), at(18), uuid.uuid4()))

    assert checker.is_available(uuid.uuid4(), make_range(at(16, 30), at(17)))


@pytest.mark.parametrize(
    "candidate_from, candidate_to",
    [
        (at(14), at(16)),  # новый интервал заканчивается ровно в начале существующего
        (at(18), at(20)),  # новый интервал начинается ровно в конце существующего
    ],
)
def test_touching_boundaries_are_not_overlap(
    checker: RoomAvailabilityChecker,
    room_event_repository: RoomEventRepository,
    candidate_from,
    candidate_to,
):
    """Тест: касание границ не считается пересечением."""
    room_id = uuid.uuid4()
    room_event_repository.save(make_show(at(16), at(18), room_id))

    assert checker.is_available(room_id, make_range(candidate_from, candidate_to))


def test_touching_ranges_are_mutually_available(
    checker: RoomAvailabilityChecker, room_event_repository: RoomEventRepository
):
    """Тест: A.to == B.from допустимо в обоих порядках добавления."""
    first_room, second_room = uuid.uuid4(), uuid.uuid4()
    a = make_range(at(10), at(12))
    b = make_range(at(12), at(13))

    room_event_repository.save(make_show(a.from_, a.to, first_room))
    assert checker.is_available(first_room, b)

    room_event_repository.save(make_cleaning_slot(b.from_, b.to, second_room))
    assert checker.is_available(second_room, a)


@pytest.mark.parametrize(
    "candidate_from, candidate_to",
    [
        (at(15), at(16, 30)),  # конец попадает внутрь
        (at(17), at(19)),  # начало попадает внутрь
        (at(16, 15), at(17, 45)),  # целиком внутри
    ],
)
def test_unavailable_when_timestamp_falls_inside_event(
    checker: RoomAvailabilityChecker,
    room_event_repository: RoomEventRepository,
    candidate_from,
    candidate_to,
):
    """Тест: начало или конец строго внутри существующего события делает зал занятым."""
    room_id = uuid.uuid4()
    room_event_repository.save(make_unavailability(at(16), at(18), room_id))

    assert not checker.is_available(room_id, make_range(candidate_from, candidate_to))


def test_cleaning_slots_block_the_room(
    checker: RoomAvailabilityChecker, room_event_repository: RoomEventRepository
):
    """Тест: уборка тоже занимает зал."""
    room_id = uuid.uuid4()
    room_event_repository.save(make_cleaning_slot(at(18), at(18, 15), room_id))

    assert not checker.is_available(room_id, make_range(at(18, 10), at(20)))


def test_only_events_starting_on_candidate_day_are_checked(
    checker: RoomAvailabilityChecker, room_event_repository: RoomEventRepository
):
    """
    Тест: учитываются только события, начинающиеся в день начала интервала.

    Интервал, переходящий через полночь, не сверяется с событиями следующего дня.
    """
    room_id = uuid.uuid4()
    next_day = DAY.replace(day=DAY.day + 1)
    room_event_repository.save(make_show(at(0, 30, next_day), at(2, 0, next_day), room_id))

    assert checker.is_available(room_id, make_range(at(23), at(1, 0, next_day)))
    assert not checker.is_available(room_id, make_range(at(0, 0, next_day), at(1, 0, next_day)))


@pytest.mark.parametrize(
    "candidate_from, candidate_to",
    [
        (at(16), at(18)),  # совпадает с существующим
        (at(15), at(19)),  # целиком охватывает существующее
    ],
)
def test_identical_or_enclosing_range_is_not_detected(
    checker: RoomAvailabilityChecker,
    room_event_repository: RoomEventRepository,
    candidate_from,
    candidate_to,
):
    """
    Тест: пересечение ищется только по началу и концу нового интервала.

    Ни одна из границ не лежит строго внутри 16:00-18:00, поэтому зал считается свободным.
    """
    room_id = uuid.uuid4()
    room_event_repository.save(make_show(at(16), at(18), room_id))

    assert checker.is_available(room_id, make_range(candidate_from, candidate_to))


def test_conflict_is_logged(room_event_repository: RoomEventRepository):
    logger = MagicMock(spec=ILogger)
    checker = RoomAvailabilityChecker(room_event_repository, logger=logger)
    room_id = uuid.uuid4()
    room_event_repository.save(make_show(at(16), at(18), room_id))

    assert not checker.is_available(room_id, make_range(at(17), at(19)))
    logger.debug.assert_called_once()


def test_console_logger_is_used_by_default(room_event_repository: RoomEventRepository):
    checker = RoomAvailabilityChecker(room_event_repository)

    assert isinstance(checker._logger, ConsoleLogger)
