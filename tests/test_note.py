import unittest

import canonic.note


class UtterTests (unittest.TestCase):

	"""
	Tests for expanding pitch values into notes.
	"""

	def test_rest_has_no_pitch_or_velocity (self) -> None:

		"""
		A missing pitch should produce one rest that only keeps its timing.
		"""

		notes = canonic.note.utter(None, 2, 1, 1.0)

		self.assertEqual(notes, [canonic.note.Note(time=2, duration=1)])
		self.assertFalse(notes[0].has("velocity"))
		self.assertEqual(notes[0].to_dict(), {"time": 2, "duration": 1})


	def test_scalar (self) -> None:

		"""
		A plain pitch should produce one note with every field set.
		"""

		notes = canonic.note.utter(60, 0, 1, 0.5)

		self.assertEqual(notes, [canonic.note.Note(time=0, duration=1, pitch=60, velocity=0.5)])


	def test_cluster_keeps_order_and_nests (self) -> None:

		"""
		A list should sound every member at once, in written order.
		"""

		notes = canonic.note.utter([4, [0, 7]], 1, 2, 1.0)

		self.assertEqual([n.pitch for n in notes], [4, 0, 7])
		self.assertTrue(all(n.time == 1 and n.duration == 2 for n in notes))


	def test_chord_sorts_pitches (self) -> None:

		"""
		A dict should render its pitches lowest first, whatever the labels.
		"""

		notes = canonic.note.utter({"fifth": 7, "root": 0, "third": 4}, 0, 1, 1.0)

		self.assertEqual([n.pitch for n in notes], [0, 4, 7])


	def test_chord_with_rest_sorts_rest_first (self) -> None:

		"""
		A rest inside a chord should render before its pitches, without error.
		"""

		notes = canonic.note.utter({"a": None, "b": 2}, 0, 1, 1.0)

		self.assertEqual(notes, [
			canonic.note.Note(time=0, duration=1),
			canonic.note.Note(time=0, duration=1, pitch=2, velocity=1.0),
		])


	def test_any_ordered_collection_is_a_cluster (self) -> None:

		"""
		Ranges and generators should expand like lists.
		"""

		self.assertEqual([n.pitch for n in canonic.note.utter(range(0, 3), 0, 1, 1.0)], [0, 1, 2])
		self.assertEqual([n.pitch for n in canonic.note.utter((p * 2 for p in [1, 2]), 0, 1, 1.0)], [2, 4])
		self.assertEqual([n.pitch for n in canonic.note.utter([4, range(0, 2)], 0, 1, 1.0)], [4, 0, 1])


	def test_unknown_shapes_are_scalar (self) -> None:

		"""
		Strings and other values should be treated as a single pitch.
		"""

		self.assertEqual(canonic.note.utterance("C#"), canonic.note.Scalar(pitch="C#"))
		self.assertEqual(len(canonic.note.utter("C#", 0, 1, 1.0)), 1)


	def test_utterance_is_idempotent (self) -> None:

		"""
		Normalising an already normalised value should return it unchanged.
		"""

		shape = canonic.note.utterance([0, None])

		self.assertIs(canonic.note.utterance(shape), shape)
		self.assertEqual(shape, canonic.note.Cluster(members=(canonic.note.Scalar(pitch=0), canonic.note.Rest())))


class NoteTests (unittest.TestCase):

	"""
	Tests for generic key access on notes.
	"""

	def test_set_and_get_attributes (self) -> None:

		"""
		Auxiliary keys should live beside the core fields.
		"""

		note = canonic.note.Note(time=0, duration=1, pitch=60).set("part", "bass")

		self.assertTrue(note.has("part"))
		self.assertEqual(note.get("part"), "bass")
		self.assertFalse(note.has("drum"))
		self.assertEqual(note.get("drum", "none"), "none")


	def test_set_returns_new_note (self) -> None:

		"""
		Notes should never change in place.
		"""

		note = canonic.note.Note(time=0, duration=1)
		moved = note.set("time", 3)

		self.assertEqual(note.time, 0)
		self.assertEqual(moved.time, 3)


	def test_setting_none_removes (self) -> None:

		"""
		Setting an optional key to None should remove it.
		"""

		note = canonic.note.Note(time=0, duration=1, pitch=60).set("part", "bass")

		self.assertFalse(note.set("pitch", None).has("pitch"))
		self.assertEqual(note.set("part", None).attributes, {})


	def test_time_and_duration_are_required (self) -> None:

		"""
		Removing the timing of a note should be refused.
		"""

		note = canonic.note.Note(time=0, duration=1)

		with self.assertRaises(ValueError):
			note.remove("time")

		with self.assertRaises(ValueError):
			note.set("duration", None)


	def test_from_dict_round_trip (self) -> None:

		"""
		Plain mappings should convert to notes and back.
		"""

		values = {"time": 1, "duration": 2, "pitch": 5, "part": "tenor"}
		note = canonic.note.Note.from_dict(values)

		self.assertEqual(note.attributes, {"part": "tenor"})
		self.assertEqual(note.to_dict(), values)


	def test_from_dict_requires_timing (self) -> None:

		"""
		A mapping without a duration should be rejected.
		"""

		with self.assertRaises(ValueError):
			canonic.note.Note.from_dict({"time": 0, "pitch": 60})


class ImmutableNoteTests (unittest.TestCase):

	"""
	Tests that notes behave as immutable values.
	"""

	def test_attributes_are_read_only (self) -> None:

		"""
		Attributes should not be editable in place.
		"""

		note = canonic.note.Note(time=0, duration=1).set("part", "bass")

		with self.assertRaises(TypeError):
			note.attributes["part"] = "lead"


	def test_copies_do_not_share_attributes (self) -> None:

		"""
		A source dict edited after construction should not leak into notes.
		"""

		source = {"part": "bass"}
		note = canonic.note.Note(time=0, duration=1, attributes=source)
		moved = note.set("time", 2)

		source["part"] = "lead"

		self.assertEqual(note.get("part"), "bass")
		self.assertEqual(moved.get("part"), "bass")


	def test_notes_are_hashable (self) -> None:

		"""
		Equal notes should hash equally and work in sets.
		"""

		a = canonic.note.Note(time=0, duration=1, pitch=60).set("part", "bass")
		b = canonic.note.Note(time=0, duration=1, pitch=60, attributes={"part": "bass"})

		self.assertEqual(a, b)
		self.assertEqual(hash(a), hash(b))
		self.assertEqual(len({a, b, canonic.note.Note(time=0, duration=1)}), 2)
