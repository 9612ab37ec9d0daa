"""Attribute combinators over melodies.

Each combinator rewrites one key of every note it applies to and leaves the
structure of the melody alone: notes are never reordered, added or dropped.
All of them are lazy and accept any iterable of notes.
"""

import typing

import canonic.note
import canonic.scale


Melody = typing.Iterable[canonic.note.Note]


def is_ (value: typing.Any) -> typing.Callable[..., typing.Any]:

	"""
	Return a function that ignores its arguments and returns value.

	Example:
		```python
		notes = wherever(lambda note: not note.has("part"), "part", is_("bass"), notes)
		```
	"""

	return lambda *args, **kwargs: value


def wherever (applies: typing.Callable[[canonic.note.Note], bool], key: str, f: typing.Callable[[typing.Any], typing.Any], notes: Melody) -> typing.Iterator[canonic.note.Note]:

	"""
	Apply f to the key of each note for which applies(note) is true.

	f receives ``None`` when the note lacks key, so it must tolerate that.
	"""

	for note in notes:
		if applies(note):
			yield note.set(key, f(note.get(key)))
		else:
			yield note


def where (key: str, f: typing.Callable[[typing.Any], typing.Any], notes: Melody) -> typing.Iterator[canonic.note.Note]:

	"""
	Apply f to the key of each note, passing over notes that lack it.

	Example:
		```python
		notes = where("time", canonic.scale.bpm(90), notes)
		```
	"""

	return wherever(lambda note: note.has(key), key, f, notes)


def all_ (key: str, value: typing.Any, notes: Melody) -> typing.Iterator[canonic.note.Note]:

	"""Set key to a constant value on every note."""

	return wherever(is_(True), key, is_(value), notes)


def having (key: str, values: typing.Iterable[typing.Any], notes: Melody) -> typing.Iterator[canonic.note.Note]:

	"""
	Zip values onto key, one per note, stopping at the shorter input.

	Example:
		```python
		drums = having("drum", ["kick", "snare"], canonic.phrase.rhythm([1, 1]))
		```
	"""

	for note, value in zip(notes, values):
		yield note.set(key, value)


def after (wait: typing.Any, notes: Melody) -> typing.Iterator[canonic.note.Note]:

	"""Delay every note by wait."""

	return where("time", canonic.scale.from_(wait), notes)
