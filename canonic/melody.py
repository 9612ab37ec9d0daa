"""Combining melodies in time.

A melody is any iterable of notes in non-decreasing time order. ``with_()``
merges melodies lazily so unbounded melodies can take part, while
``then()``, ``mapthen()`` and ``times()`` need to know where the earlier
material ends and so materialise it.
"""

import functools
import itertools
import typing

import canonic.combinators
import canonic.note


Melody = typing.Iterable[canonic.note.Note]

_END = object()


def _blend (leader: Melody, follower: Melody) -> typing.Iterator[canonic.note.Note]:

	"""
	Merge two time-ordered melodies. Notes of leader win ties.
	"""

	leaders = iter(leader)
	followers = iter(follower)

	a = next(leaders, _END)
	b = next(followers, _END)

	while a is not _END and b is not _END:

		if a.time <= b.time:
			yield a
			a = next(leaders, _END)
		else:
			yield b
			b = next(followers, _END)

	if a is not _END:
		yield a
		yield from leaders

	if b is not _END:
		yield b
		yield from followers


def with_ (*melodies: Melody) -> typing.Iterator[canonic.note.Note]:

	"""
	Blend melodies into one, keeping time order.

	Inputs are assumed to be in time order already. When notes coincide,
	those of the earlier argument come first. More than two melodies are
	merged pairwise from the left.

	Example:
		```python
		song = with_(melody, bass, drums)
		```
	"""

	if not melodies:
		return iter(())

	return iter(functools.reduce(_blend, melodies))


def but (start: typing.Any, end: typing.Any, variation: Melody, notes: Melody) -> typing.Iterator[canonic.note.Note]:

	"""
	Replace the window [start, end) of notes with variation.

	Notes starting inside the window are dropped. Notes that start before it
	but are still sounding at start are cut short to end at start. The
	variation is delayed to begin at start and wins ties with the survivors.
	When end <= start nothing is dropped, but the clipping and the merge
	still happen.

	Example:
		```python
		notes = but(2, 4, canonic.phrase.phrase([1, 1], [7, 5]), melody)
		```
	"""

	def starts_in (note: canonic.note.Note) -> bool:
		return start <= note.time < end

	def clip (note: canonic.note.Note) -> canonic.note.Note:
		if note.time < start < note.time + note.duration:
			return note.set("duration", start - note.time)
		return note

	survivors = (clip(note) for note in notes if not starts_in(note))

	return with_(canonic.combinators.after(start, variation), survivors)


def duration (notes: Melody) -> typing.Any:

	"""
	Return the time at which the last note of notes finishes, or 0.
	"""

	return max(itertools.chain([0], (note.time + note.duration for note in notes)))


def then (later: Melody, earlier: Melody) -> typing.Iterator[canonic.note.Note]:

	"""
	Play later straight after earlier.

	Example:
		```python
		theme = then(response, call)
		```
	"""

	earlier = list(earlier)

	return with_(earlier, canonic.combinators.after(duration(earlier), later))


def mapthen (f: typing.Callable[..., Melody], *sequences: typing.Iterable[typing.Any]) -> typing.List[canonic.note.Note]:

	"""
	Map f across the sequences in parallel, then play the results back to back.

	Each result is assumed to be in time order, as for ``with_()``.

	Example:
		```python
		mapthen(lambda m: m[:-1], [bassline, vocals])
		```
	"""

	joined: typing.List[canonic.note.Note] = []
	end = 0

	for piece in map(f, *sequences):

		placed = list(canonic.combinators.after(end, piece))

		if not placed:
			continue

		# Only the tail of joined that starts after the new piece needs merging
		split = len(joined)
		while split > 0 and joined[split - 1].time > placed[0].time:
			split -= 1

		tail = joined[split:]
		del joined[split:]
		joined.extend(_blend(tail, placed))

		end = max(end, duration(placed))

	return joined


def times (n: int, notes: Melody) -> typing.List[canonic.note.Note]:

	"""
	Repeat notes n times back to back.

	Example:
		```python
		bassline = times(4, riff)
		```
	"""

	notes = list(notes)

	return mapthen(lambda piece: piece, itertools.repeat(notes, max(n, 0)))
