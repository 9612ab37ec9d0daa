import itertools
import typing

import canonic.constants.velocity
import canonic.melody
import canonic.note


def _is_compound (duration: typing.Any) -> bool:

	"""An ordered collection of durations subdivides one pitch slot."""

	return canonic.note.is_sequential(duration)


def _render (duration: typing.Any, pitch: typing.Any, velocity: typing.Any) -> typing.List[canonic.note.Note]:

	"""
	Render one slot of a phrase starting at time 0.
	"""

	if _is_compound(duration):
		# One-shot pitch iterables must survive every subdivision
		shape = canonic.note.utterance(pitch)
		return canonic.melody.mapthen(lambda part: _render(part, shape, velocity), duration)

	return canonic.note.utter(pitch, 0, duration, velocity)


def phrase (durations: typing.Iterable[typing.Any], pitches: typing.Iterable[typing.Any], velocities: typing.Optional[typing.Iterable[typing.Any]] = None) -> typing.List[canonic.note.Note]:

	"""
	Translate parallel durations and pitches into a melody.

	``None`` pitches are rests, lists are clusters and dicts are chords.
	A list duration plays the same pitch once per element, back to back.
	The inputs are consumed together and stop at the shortest one, so any
	of them may be infinite as long as another one ends.

	Without velocities the notes carry no velocity at all.

	Example:
		```python
		phrase([0.5, 0.5, 1.5, 1.5], [0, 1, None, 4])
		phrase([1, 1, 2], [4, 3, [0, 2]])
		phrase([1, [1, 2]], [4, 3])
		phrase(itertools.repeat(1), [{"i": 0, "iii": 2, "v": 4}, 3])
		```
	"""

	if velocities is None:
		notes = phrase(durations, pitches, itertools.repeat(canonic.constants.velocity.DEFAULT_VELOCITY))
		return [note.remove("velocity") for note in notes]

	return canonic.melody.mapthen(_render, durations, pitches, velocities)


def rhythm (durations: typing.Iterable[typing.Any]) -> typing.List[canonic.note.Note]:

	"""
	Translate durations into a melody of rests.

	Example:
		```python
		rhythm([1, 1, 2])
		```
	"""

	return phrase(durations, itertools.repeat(None))
