"""The boundary between melodies and whatever makes sound.

A renderer is any callable that takes a finished melody. ``MidiRenderer`` is
the one shipped here: it turns notes into timestamped ``mido`` messages and
leaves scheduling them to the caller, e.g. by sending each message to a
``mido`` output port at its time.
"""

import dataclasses
import logging
import typing

import mido

import canonic.constants.velocity
import canonic.note


logger = logging.getLogger(__name__)

MIDI_CHANNELS = 16
MIDI_NOTE_RANGE = range(0, 128)

Renderer = typing.Callable[[typing.List[canonic.note.Note]], typing.Any]


@dataclasses.dataclass (order=True)
class MidiEvent:

	"""
	A MIDI message at an absolute time.

	Events order by time, with note_off before note_on at the same instant so
	that repeated pitches retrigger cleanly.
	"""

	time: typing.Any
	rank: int
	message: mido.Message = dataclasses.field(compare=False)


def midi_velocity (velocity: typing.Optional[float], scale: int = canonic.constants.velocity.MAX_MIDI_VELOCITY) -> int:

	"""
	Map a full-scale velocity onto the MIDI range, clamping the result.

	A missing velocity counts as full scale.
	"""

	if velocity is None:
		velocity = canonic.constants.velocity.DEFAULT_VELOCITY

	value = int(round(velocity * scale))

	return max(canonic.constants.velocity.MIN_MIDI_VELOCITY, min(canonic.constants.velocity.MAX_MIDI_VELOCITY, value))


def note_events (note: canonic.note.Note, channel: int = 0, velocity_scale: int = canonic.constants.velocity.MAX_MIDI_VELOCITY) -> typing.List[MidiEvent]:

	"""
	Return the note_on/note_off pair for a note, or nothing for a rest.
	"""

	if not note.has("pitch"):
		return []

	pitch = note.pitch

	if isinstance(pitch, bool) or not isinstance(pitch, int) or pitch not in MIDI_NOTE_RANGE:
		logger.warning(f"Skipping note at {note.time}: pitch {pitch!r} is not a MIDI note number")
		return []

	velocity = max(canonic.constants.velocity.MIN_NOTE_ON_VELOCITY, midi_velocity(note.velocity, velocity_scale))

	return [
		MidiEvent(time=note.time, rank=1, message=mido.Message('note_on', channel=channel, note=pitch, velocity=velocity)),
		MidiEvent(time=note.time + note.duration, rank=0, message=mido.Message('note_off', channel=channel, note=pitch, velocity=0)),
	]


def to_midi_events (notes: typing.Iterable[canonic.note.Note], channel: int = 0) -> typing.List[MidiEvent]:

	"""
	Convert a finite melody into time-ordered MIDI events on one channel.

	Example:
		```python
		for event in to_midi_events(canonic.phrase.phrase([1, 1], [60, 62])):
			print(event.time, event.message)
		```
	"""

	renderer = MidiRenderer(default_channel=channel)
	renderer(notes)

	return renderer.sorted_events()


class MidiRenderer:

	"""
	Collects MIDI events for every melody it is called with.

	Each note's ``part`` attribute picks its channel from ``channels``;
	notes of unknown parts, or without a part, use ``default_channel``.
	"""

	def __init__ (
		self,
		channels: typing.Optional[typing.Mapping[str, int]] = None,
		default_channel: int = 0,
		velocity_scale: int = canonic.constants.velocity.MAX_MIDI_VELOCITY
	) -> None:

		"""
		Initialize an empty renderer with a part-to-channel map.
		"""

		self.channels: typing.Dict[str, int] = dict(channels or {})

		for channel in list(self.channels.values()) + [default_channel]:
			if not 0 <= channel < MIDI_CHANNELS:
				raise ValueError(f"MIDI channel must be between 0 and {MIDI_CHANNELS - 1}, got {channel}")

		if velocity_scale <= 0:
			raise ValueError("Velocity scale must be positive")

		self.default_channel = default_channel
		self.velocity_scale = velocity_scale
		self.events: typing.List[MidiEvent] = []


	def channel_for (self, note: canonic.note.Note) -> int:

		"""Return the MIDI channel for a note's part."""

		return self.channels.get(note.get("part"), self.default_channel)


	def __call__ (self, notes: typing.Iterable[canonic.note.Note]) -> typing.List[canonic.note.Note]:

		"""
		Render a melody, returning its notes unchanged.
		"""

		notes = list(notes)

		for note in notes:
			self.events.extend(note_events(note, self.channel_for(note), self.velocity_scale))

		return notes


	def sorted_events (self) -> typing.List[MidiEvent]:

		"""Return every collected event in time order."""

		return sorted(self.events)


	def clear (self) -> None:

		"""Forget all collected events."""

		self.events.clear()
