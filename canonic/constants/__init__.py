"""Constants for Canonic.

This package contains two sets of constants:

- ``canonic.constants.durations`` - Beat-based durations for phrase specifications
- ``canonic.constants.velocity`` - Full-scale and MIDI velocity constants
"""
