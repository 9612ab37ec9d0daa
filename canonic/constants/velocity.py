"""Velocity constants.

Phrases carry velocity on a full-scale range where 1.0 is the loudest note.
The MIDI adapter maps that range onto MIDI attack strength (0-127).
"""

# Full-scale velocity given to phrase notes when none is specified
DEFAULT_VELOCITY = 1.0

# MIDI standard range
MIN_MIDI_VELOCITY = 0
MAX_MIDI_VELOCITY = 127

# A note_on at velocity 0 means note_off, so sounding notes never go below this
MIN_NOTE_ON_VELOCITY = 1
