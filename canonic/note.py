import collections.abc
import dataclasses
import types
import typing


CORE_KEYS = ("time", "duration", "pitch", "velocity")
REQUIRED_KEYS = ("time", "duration")


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A single timed event in a melody.

	Only ``time`` and ``duration`` are always present. ``pitch`` and
	``velocity`` are optional (``None`` means absent, so a Note without a
	pitch is a rest), and any other named quality such as ``part`` lives in
	``attributes``. Notes are never modified in place: ``set()`` and
	``remove()`` return new Notes.

	Example:
		```python
		note = canonic.note.Note(time=0, duration=1, pitch=60)
		louder = note.set("velocity", 1.0)
		tagged = louder.set("part", "bass")
		```
	"""

	time: typing.Any
	duration: typing.Any
	pitch: typing.Any = None
	velocity: typing.Any = None
	attributes: typing.Mapping[str, typing.Any] = dataclasses.field(default_factory=dict)


	def __post_init__ (self) -> None:

		"""Keep a private read-only copy of the attributes."""

		object.__setattr__(self, "attributes", types.MappingProxyType(dict(self.attributes)))


	def __hash__ (self) -> int:

		return hash((self.time, self.duration, self.pitch, self.velocity, tuple(sorted(self.attributes.items()))))


	@classmethod
	def from_dict (cls, values: typing.Mapping[str, typing.Any]) -> "Note":

		"""
		Build a Note from a plain mapping, e.g. ``{"time": 0, "duration": 1}``.
		"""

		for key in REQUIRED_KEYS:
			if values.get(key) is None:
				raise ValueError(f"A note needs a '{key}' value")

		core = {key: values.get(key) for key in CORE_KEYS}
		extra = {key: value for key, value in values.items() if key not in CORE_KEYS and value is not None}

		return cls(attributes=extra, **core)


	def has (self, key: str) -> bool:

		"""Return True if the note carries a value for key."""

		if key in CORE_KEYS:
			return getattr(self, key) is not None

		return self.attributes.get(key) is not None


	def get (self, key: str, default: typing.Any = None) -> typing.Any:

		"""Return the value for key, or default when the note lacks it."""

		if key in CORE_KEYS:
			value = getattr(self, key)
		else:
			value = self.attributes.get(key)

		return default if value is None else value


	def set (self, key: str, value: typing.Any) -> "Note":

		"""
		Return a copy of the note with key set to value.

		Setting an optional key to ``None`` removes it.
		"""

		if value is None:
			return self.remove(key)

		if key in CORE_KEYS:
			return dataclasses.replace(self, **{key: value})

		attributes = dict(self.attributes)
		attributes[key] = value

		return dataclasses.replace(self, attributes=attributes)


	def remove (self, key: str) -> "Note":

		"""Return a copy of the note without key."""

		if key in REQUIRED_KEYS:
			raise ValueError(f"Cannot remove '{key}' from a note")

		if key in CORE_KEYS:
			return dataclasses.replace(self, **{key: None})

		if key not in self.attributes:
			return self

		attributes = {k: v for k, v in self.attributes.items() if k != key}

		return dataclasses.replace(self, attributes=attributes)


	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the present keys of the note as a plain dict."""

		values = {key: getattr(self, key) for key in CORE_KEYS if getattr(self, key) is not None}
		values.update((key, value) for key, value in self.attributes.items() if value is not None)

		return values


# Pitch shapes. Raw pitch values are normalised into one of these by
# utterance(), after which expansion never inspects types again.

@dataclasses.dataclass(frozen=True)
class Rest:

	"""
	Silence that still occupies time.
	"""

	def notes (self, time: typing.Any, duration: typing.Any, velocity: typing.Any) -> typing.List[Note]:

		"""A rest keeps only its timing: velocity is dropped."""

		return [Note(time=time, duration=duration)]


@dataclasses.dataclass(frozen=True)
class Scalar:

	"""
	A single sounding pitch.
	"""

	pitch: typing.Any

	def notes (self, time: typing.Any, duration: typing.Any, velocity: typing.Any) -> typing.List[Note]:

		return [Note(time=time, duration=duration, pitch=self.pitch, velocity=velocity)]


@dataclasses.dataclass(frozen=True)
class Cluster:

	"""
	Pitches sounding together, kept in the order they were written.
	"""

	members: typing.Tuple[typing.Any, ...]

	def notes (self, time: typing.Any, duration: typing.Any, velocity: typing.Any) -> typing.List[Note]:

		result: typing.List[Note] = []

		for member in self.members:
			result.extend(member.notes(time, duration, velocity))

		return result


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	Pitches keyed by arbitrary labels. Rendered lowest pitch first.
	"""

	pitches: typing.Mapping[typing.Any, typing.Any]

	def notes (self, time: typing.Any, duration: typing.Any, velocity: typing.Any) -> typing.List[Note]:

		# Rests sort before pitches
		ordered = sorted(self.pitches.values(), key=lambda pitch: (pitch is not None, pitch))

		return utterance(ordered).notes(time, duration, velocity)


Utterance = typing.Union[Rest, Scalar, Cluster, Chord]


def is_sequential (value: typing.Any) -> bool:

	"""
	Return True for ordered collections of values: lists, tuples, ranges,
	generators and other iterables, but not strings, bytes or mappings.
	"""

	if isinstance(value, (str, bytes, bytearray, collections.abc.Mapping)):
		return False

	return isinstance(value, collections.abc.Iterable)


def utterance (value: typing.Any) -> Utterance:

	"""
	Normalise a raw pitch value into its shape.

	``None`` is a rest and a mapping is a chord. Any other ordered
	collection (list, tuple, range, generator) is a cluster, nesting
	allowed, and anything else is a scalar pitch. Values that are already
	shapes are returned unchanged.
	"""

	if isinstance(value, (Rest, Scalar, Cluster, Chord)):
		return value

	if value is None:
		return Rest()

	if isinstance(value, collections.abc.Mapping):
		return Chord(pitches=dict(value))

	if is_sequential(value):
		return Cluster(members=tuple(utterance(member) for member in value))

	return Scalar(pitch=value)


def utter (pitch: typing.Any, time: typing.Any, duration: typing.Any, velocity: typing.Any) -> typing.List[Note]:

	"""
	Expand a pitch value into the notes it produces at one time.

	Example:
		```python
		utter(None, 0, 1, 1.0)             # one rest
		utter([0, 2], 0, 1, 1.0)           # two notes at time 0
		utter({"root": 4, "third": 0}, 0, 1, 1.0)   # pitches 0 then 4
		```
	"""

	return utterance(pitch).notes(time, duration, velocity)
