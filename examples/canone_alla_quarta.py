import logging

import canonic.render
import canonic.variations.canone_alla_quarta as canone

logging.basicConfig(level=logging.INFO)

LEADER_CHANNEL = 0
BASS_CHANNEL = 1
FOLLOWER_CHANNEL = 2

renderer = canonic.render.MidiRenderer(channels={
	"leader": LEADER_CHANNEL,
	"bass": BASS_CHANNEL,
	"follower": FOLLOWER_CHANNEL,
})

canone.play(renderer)

# Times are in seconds at 90 bpm. Send each message to a mido output port at
# its time to hear it.
for event in renderer.sorted_events()[:12]:
	logging.info(f"{float(event.time):7.3f}s  {event.message}")

logging.info(f"{len(renderer.events)} MIDI events in total")
