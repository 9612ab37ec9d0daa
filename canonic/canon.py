"""Canon transforms.

A canon transform is a function from a melody to a melody. The basic ones
translate (``shift``) or remap one axis (``skew``), and richer canons are
built by composing them. ``compose`` applies right to left, so

	compose(interval_canon(-3), mirror_canon, simple_canon(3))

delays first, then inverts, then transposes the inverted pitches.
"""

import logging
import operator
import typing

import canonic.combinators
import canonic.melody
import canonic.note
import canonic.scale


logger = logging.getLogger(__name__)

Melody = typing.Iterable[canonic.note.Note]
Transform = typing.Callable[[Melody], Melody]


def compose (*transforms: Transform) -> Transform:

	"""Chain transforms, applying the rightmost one first."""

	def composed (notes: Melody) -> Melody:

		for transform in reversed(transforms):
			notes = transform(notes)

		return notes

	return composed


def skew (key: str, f: typing.Callable[[typing.Any], typing.Any]) -> Transform:

	"""
	Return a transform applying f to one axis of every note.

	Notes without that axis (rests, for "pitch") pass through.

	Example:
		```python
		in_key = skew("pitch", canonic.scale.major)
		```
	"""

	return lambda notes: canonic.combinators.where(key, f, notes)


def shift (time: typing.Any = 0, pitch: typing.Any = 0) -> Transform:

	"""Return a transform translating every note in time and pitch."""

	return compose(skew("time", canonic.scale.from_(time)), skew("pitch", canonic.scale.from_(pitch)))


def tempo_warp (tempo: typing.Callable[[typing.Any], typing.Any]) -> Transform:

	"""
	Return a transform mapping beats through tempo.

	Onsets go through tempo directly, and each duration becomes the span
	between the warped onset and the warped end of the note.

	Example:
		```python
		in_seconds = tempo_warp(canonic.scale.bpm(90))
		```
	"""

	def warp (notes: Melody) -> typing.Iterator[canonic.note.Note]:

		for note in notes:
			start = tempo(note.time)
			end = tempo(note.time + note.duration)
			yield note.set("time", start).set("duration", end - start)

	return warp


def simple_canon (wait: typing.Any) -> Transform:

	"""Delay the melody by wait."""

	return shift(time=wait)


def interval_canon (interval: typing.Any) -> Transform:

	"""Transpose the melody by interval."""

	return shift(pitch=interval)


mirror_canon = skew("pitch", operator.neg)
crab_canon = skew("time", operator.neg)
table_canon = compose(mirror_canon, crab_canon)

canone_alla_quarta = compose(interval_canon(-3), mirror_canon, simple_canon(3))


def retrograde (notes: Melody) -> typing.List[canonic.note.Note]:

	"""
	Play a finite melody backwards, starting from 0.

	Unlike ``crab_canon`` the result is in time order, and each note ends
	where its original began.
	"""

	notes = list(notes)
	total = canonic.melody.duration(notes)
	reflected = [note.set("time", total - (note.time + note.duration)) for note in reversed(notes)]

	return sorted(reflected, key=operator.attrgetter("time"))


def perform (
	parts: typing.Mapping[str, Melody],
	start: typing.Any,
	tempo: typing.Callable[[typing.Any], typing.Any],
	key: typing.Callable[[typing.Any], typing.Any],
	renderer: typing.Callable[[typing.List[canonic.note.Note]], typing.Any]
) -> typing.Dict[str, typing.Any]:

	"""
	Put each part into time and key and hand it to renderer.

	Every note is tagged with a ``part`` attribute naming its part. Times are
	warped through tempo and then offset by start; pitches are mapped through
	key (scale degree to absolute pitch).

	Parameters:
		parts: Melodies in beats and scale degrees, by name
		start: Offset of the performance, in tempo units
		tempo: Beat-to-time function, e.g. ``canonic.scale.bpm(90)``
		key: Degree-to-pitch function, e.g. ``compose`` of a tonic and a scale
		renderer: Callable receiving each finished melody

	Returns:
		The renderer's result for each part, by name.
	"""

	in_time = compose(shift(time=start), tempo_warp(tempo))
	in_key = skew("pitch", key)

	results: typing.Dict[str, typing.Any] = {}

	for name, notes in parts.items():
		performed = list(in_key(in_time(canonic.combinators.all_("part", name, notes))))
		logger.info(f"Performing part '{name}': {len(performed)} notes")
		results[name] = renderer(performed)

	return results
