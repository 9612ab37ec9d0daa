import fractions

import canonic.melody
import canonic.render
import canonic.variations.canone_alla_quarta as canone


def test_voices_have_expected_lengths () -> None:

	"""The melody has 61 notes and the bass 34."""

	assert len(canone.call) == 18
	assert len(canone.response) == 14
	assert len(canone.development) == 29
	assert len(canone.melody) == 61
	assert len(canone.bass) == 34
	assert canonic.melody.duration(canone.bass) == 21 + fractions.Fraction(13, 4)


def test_melody_starts_after_pickup () -> None:

	"""The leader enters half a beat in, in time order."""

	times = [n.time for n in canone.melody]

	assert times[0] == fractions.Fraction(1, 2)
	assert times == sorted(times)


def test_follower_is_inverted_fourth_below () -> None:

	"""The follower enters three beats later, mirrored and three degrees down."""

	for leader, follower in zip(canone.melody, canone.follower):
		assert follower.time == leader.time + 3
		assert follower.pitch == -leader.pitch - 3


def test_play_renders_every_voice () -> None:

	"""Playing through a MIDI renderer should sound every note of every part."""

	renderer = canonic.render.MidiRenderer(channels={"leader": 0, "bass": 1, "follower": 2})

	results = canone.play(renderer)

	assert set(results) == {"bass", "leader", "follower"}
	assert len(renderer.events) == 2 * (34 + 61 + 61)

	first_leader = next(e for e in renderer.sorted_events() if e.message.channel == 0)

	assert first_leader.time == fractions.Fraction(1, 3)
	assert first_leader.message.note == 74
