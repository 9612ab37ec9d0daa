import itertools
import typing


ScaleFn = typing.Callable[[int], typing.Any]


# Pitch classes of each scale relative to its tonic. steps() turns these into
# the interval pattern scale() expects.
SCALE_DEFINITIONS: typing.Dict[str, typing.List[int]] = {
	"blues_scale": [0, 3, 5, 6, 7, 10],
	"chromatic": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
	"dorian_mode": [0, 2, 3, 5, 7, 9, 10],
	"double_harmonic": [0, 1, 4, 5, 7, 8, 11],
	"harmonic_minor": [0, 2, 3, 5, 7, 8, 11],
	"hungarian_minor": [0, 2, 3, 6, 7, 8, 11],
	"locrian_mode": [0, 1, 3, 5, 6, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"major_ionian": [0, 2, 4, 5, 7, 9, 11],
	"major_pentatonic": [0, 2, 4, 7, 9],
	"melodic_minor": [0, 2, 3, 5, 7, 9, 11],
	"minor_pentatonic": [0, 3, 5, 7, 10],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"natural_minor": [0, 2, 3, 5, 7, 8, 10],
	"phrygian_mode": [0, 1, 3, 5, 7, 8, 10],
	"whole_tone": [0, 2, 4, 6, 8, 10],
}


def sum_n (series: typing.Iterable[typing.Any], n: int) -> typing.Any:

	"""Sum the first n values of series."""

	return sum(itertools.islice(series, n))


def scale (intervals: typing.Iterable[typing.Any]) -> ScaleFn:

	"""
	Return a function mapping a scale degree to a pitch offset.

	Positive degrees accumulate the intervals, cycling through them as often
	as needed. Negative degrees walk down through the reversed intervals, so
	``scale(ivals)(-n) == -scale(reversed(ivals))(n)``.

	Example:
		```python
		major = scale([2, 2, 1, 2, 2, 2, 1])
		major(2)    # 4
		major(7)    # 12
		major(-1)   # -1
		```
	"""

	intervals = list(intervals)

	def degree_to_pitch (degree: int) -> typing.Any:

		if degree >= 0:
			return sum_n(itertools.cycle(intervals), degree)

		return -scale(reversed(intervals))(-degree)

	return degree_to_pitch


def steps (pitch_classes: typing.Sequence[int]) -> typing.List[int]:

	"""
	Convert the pitch classes of a scale into its interval pattern.

	Example:
		```python
		steps([0, 2, 4, 5, 7, 9, 11])   # [2, 2, 1, 2, 2, 2, 1]
		```
	"""

	if not pitch_classes:
		return []

	closed = list(pitch_classes) + [pitch_classes[0] + 12]

	return [high - low for low, high in zip(closed, closed[1:])]


def register_scale (name: str, pitch_classes: typing.List[int]) -> None:

	"""
	Add a scale to the registry so named_scale() can find it.
	"""

	if not pitch_classes:
		raise ValueError("A scale needs at least one pitch class")

	if sorted(set(pitch_classes)) != list(pitch_classes) or not all(0 <= pc < 12 for pc in pitch_classes):
		raise ValueError(f"Pitch classes must be ascending and within 0-11: {pitch_classes}")

	SCALE_DEFINITIONS[name] = list(pitch_classes)


def named_scale (name: str) -> ScaleFn:

	"""Return the degree-to-pitch function of a registered scale."""

	if name not in SCALE_DEFINITIONS:
		raise ValueError(f"Unknown scale '{name}'. Available: {sorted(SCALE_DEFINITIONS)}")

	return scale(steps(SCALE_DEFINITIONS[name]))


major = scale([2, 2, 1, 2, 2, 2, 1])
minor = scale([2, 1, 2, 2, 1, 2, 2])


def from_ (base: typing.Any) -> typing.Callable[[typing.Any], typing.Any]:

	"""
	Return a function that offsets its argument by base.

	Example:
		```python
		G = from_(67)
		G(major(2))   # 71
		```
	"""

	return lambda value: base + value


def bpm (beats: typing.Any) -> typing.Callable[[typing.Any], typing.Any]:

	"""
	Return a function that converts a beat number into seconds.

	Example:
		```python
		bpm(90)(3)   # 2.0
		```
	"""

	return lambda beat: beat * 60 / beats


def run (pivots: typing.Iterable[int]) -> typing.List[int]:

	"""
	Walk stepwise between each pair of pivots.

	Every pivot appears once, and the walk ends on the last pivot.

	Example:
		```python
		run([0, 4, 0])   # [0, 1, 2, 3, 4, 3, 2, 1, 0]
		run([3])         # [3]
		```
	"""

	pivots = list(pivots)

	if not pivots:
		return []

	result: typing.List[int] = []

	for start, end in zip(pivots, pivots[1:]):
		if start <= end:
			result.extend(range(start, end))
		else:
			result.extend(range(start, end, -1))

	result.append(pivots[-1])

	return result


def runs (pivot_lists: typing.Iterable[typing.Iterable[int]]) -> typing.List[int]:

	"""Join the runs of several pivot lists."""

	return [degree for pivots in pivot_lists for degree in run(pivots)]


def accumulate (series: typing.Iterable[typing.Any]) -> typing.List[typing.Any]:

	"""
	Return the running total before each position of series.

	Turns a list of durations into the onset of each note.

	Example:
		```python
		accumulate([1, 2, 3])   # [0, 1, 3]
		```
	"""

	series = list(series)

	return [sum_n(series, n) for n in range(len(series))]


def repeats (pairs: typing.Iterable[typing.Tuple[int, typing.Any]]) -> typing.List[typing.Any]:

	"""
	Expand (count, value) pairs into count copies of each value.

	Example:
		```python
		repeats([(2, 0.25), (1, 0.5)])   # [0.25, 0.25, 0.5]
		```
	"""

	return [value for count, value in pairs for _ in range(count)]
