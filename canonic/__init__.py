"""
Canonic - a combinator library for composing melodies as data.

A melody is a time-ordered sequence of notes, each with a ``time`` and a
``duration`` in beats, usually a ``pitch`` and optionally a ``velocity`` or
any other named quality. Canonic builds melodies from compact duration and
pitch specifications, merges and sequences them, and derives new ones with
the transforms of classical counterpoint. It makes no sound: the finished
melody goes to a renderer of your choosing.

Building blocks:

- **Phrases.** ``phrase([1, 1, 2], [0, 2, None])`` turns parallel
  durations and pitches into notes. ``None`` is a rest, a list is a
  cluster, a dict is a chord and a list duration subdivides one slot.
  ``rhythm()`` gives a skeleton of rests.
- **Scales.** ``scale([2, 2, 1, 2, 2, 2, 1])`` maps scale degrees to
  pitch offsets in both directions. ``run()``, ``runs()``, ``repeats()``
  and ``accumulate()`` expand compact specifications.
- **Combining.** ``with_()`` blends melodies in time order, ``then()``
  plays one after another, ``times()`` repeats and ``but()`` swaps a
  window for a variation.
- **Attributes.** ``where()``, ``wherever()``, ``all_()``, ``having()``
  and ``after()`` rewrite one quality of every note.
- **Canons.** ``shift()``, ``skew()``, ``mirror_canon``, ``crab_canon``,
  ``table_canon`` and ``tempo_warp()`` compose into canons such as
  ``canone_alla_quarta``; ``perform()`` puts parts into time and key.
- **MIDI.** ``canonic.render.MidiRenderer`` turns a melody into
  timestamped ``mido`` messages.

Minimal example:

    ```python
    import canonic

    melody = canonic.phrase.phrase([1, 1, 2], [0, 2, 4])
    canon = canonic.with_(melody, canonic.canon.simple_canon(1)(melody))

    renderer = canonic.render.MidiRenderer()
    canonic.canon.perform(
        {"melody": list(canon)},
        start = 0,
        tempo = canonic.scale.bpm(120),
        key = canonic.canon.compose(canonic.scale.from_(60), canonic.scale.major),
        renderer = renderer
    )
    ```

Package-level exports: ``Note``, ``with_``, ``then``, ``times``, ``but``,
``duration``.
"""

import canonic.canon
import canonic.melody
import canonic.note
import canonic.phrase
import canonic.render
import canonic.scale


Note = canonic.note.Note
with_ = canonic.melody.with_
then = canonic.melody.then
times = canonic.melody.times
but = canonic.melody.but
duration = canonic.melody.duration
