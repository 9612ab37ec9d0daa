import typing

import pytest

import canonic.note


def _melody (*points: typing.Tuple[typing.Any, typing.Any], duration: typing.Any = 1) -> typing.List[canonic.note.Note]:

	"""Build notes from (time, pitch) pairs sharing one duration."""

	return [canonic.note.Note(time=time, duration=duration, pitch=pitch) for time, pitch in points]


@pytest.fixture
def melody () -> typing.Callable[..., typing.List[canonic.note.Note]]:

	"""Factory for small hand-written melodies."""

	return _melody
