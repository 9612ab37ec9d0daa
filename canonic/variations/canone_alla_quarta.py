"""Canone alla quarta, from Bach's Goldberg Variations.

The melody is written as durations and scale degrees in three sections
(call, response and development). The follower enters three beats later,
inverted and a fourth below, over a bass in the same degrees.

Example:
	```python
	import canonic.render
	import canonic.variations.canone_alla_quarta as canone

	renderer = canonic.render.MidiRenderer(channels={"bass": 1, "leader": 0, "follower": 2})
	canone.play(renderer)
	events = renderer.sorted_events()
	```
"""

import fractions
import typing

import canonic.canon
import canonic.combinators
import canonic.melody
import canonic.note
import canonic.phrase
import canonic.scale


F = fractions.Fraction

# Tonics as offsets from MIDI note numbers
G = canonic.scale.from_(67)
D = canonic.scale.from_(74)

G_minor = canonic.canon.compose(G, canonic.scale.minor)
D_major = canonic.canon.compose(D, canonic.scale.major)

TEMPO = 90
PICKUP = F(1, 2)

call = canonic.phrase.phrase(
	canonic.scale.repeats([(2, F(1, 4)), (1, F(1, 2)), (14, F(1, 4)), (1, F(3, 2))]),
	canonic.scale.runs([[0, -1, 3, 0], [4], [1, 8]])
)

response = canonic.phrase.phrase(
	canonic.scale.repeats([(10, F(1, 4)), (1, F(1, 2)), (2, F(1, 4)), (1, F(9, 4))]),
	canonic.scale.runs([[7, -1, 0], [0, -3]])
)

development = canonic.phrase.phrase(
	canonic.scale.repeats([(1, F(3, 4)), (12, F(1, 4)), (1, F(1, 2)), (1, F(1)), (1, F(1, 2)), (12, F(1, 4)), (1, F(3))]),
	canonic.scale.runs([[4], [4], [2, -3], [-1, -2], [0], [3, 5], [1], [1], [1, 2], [-1, 1, -1], [5, 0]])
)

melody = list(canonic.combinators.after(PICKUP, canonic.melody.mapthen(lambda section: section, [call, response, development])))


def _triples (degrees: typing.Iterable[int]) -> typing.List[int]:

	"""Play each degree three times."""

	return [degree for degree in degrees for _ in range(3)]


bass = canonic.phrase.phrase(
	canonic.scale.repeats([(21, F(1)), (13, F(1, 4))]),
	_triples(canonic.scale.runs([[-7, -10], [-12, -10]])) + canonic.scale.run([5, -7])
)

follower = list(canonic.canon.canone_alla_quarta(melody))


def parts () -> typing.Dict[str, typing.List[canonic.note.Note]]:

	"""Return the three voices of the canon, in beats and scale degrees."""

	return {"bass": bass, "leader": melody, "follower": follower}


def play (
	renderer: typing.Callable[[typing.List[canonic.note.Note]], typing.Any],
	start: typing.Any = 0,
	tempo: typing.Optional[typing.Callable[[typing.Any], typing.Any]] = None,
	key: typing.Optional[typing.Callable[[typing.Any], typing.Any]] = None
) -> typing.Dict[str, typing.Any]:

	"""
	Perform the canon through renderer.

	Defaults to 90 bpm (times in seconds) in D major.
	"""

	if tempo is None:
		tempo = canonic.scale.bpm(TEMPO)

	if key is None:
		key = D_major

	return canonic.canon.perform(parts(), start=start, tempo=tempo, key=key, renderer=renderer)
