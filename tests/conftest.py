"""Shared fixtures for the game tests."""

import pytest

from shampoo.models import EventId
from shampoo.tables import get_event


@pytest.fixture
def chill():
    return get_event(EventId.CHILL)


@pytest.fixture
def mixed_schedule():
    """A fixed ten-day schedule with every event type in it."""
    ids = [
        EventId.CHILL,
        EventId.MEETING,
        EventId.WORKOUT,
        EventId.PARTY,
        EventId.DATE,
        EventId.CHILL,
        EventId.WORKOUT,
        EventId.MEETING,
        EventId.PARTY,
        EventId.CHILL,
    ]
    return tuple(get_event(i) for i in ids)
