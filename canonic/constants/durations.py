"""Beat-based duration constants for phrase specifications.

All values are in **beats**, where 1 = one quarter note. They are exact
``fractions.Fraction`` values so that onsets built by summing durations never
drift. Multiply by a count for multi-note durations::

    import canonic.constants.durations as dur

    # "9 sixteenth notes"
    length = 9 * dur.SIXTEENTH     # 9/4 beats

Use directly in phrase specifications::

    canonic.phrase.phrase([dur.EIGHTH, dur.EIGHTH, dur.QUARTER], [0, 1, 2])
"""

import fractions

THIRTYSECOND = fractions.Fraction(1, 8)
SIXTEENTH = fractions.Fraction(1, 4)
DOTTED_SIXTEENTH = fractions.Fraction(3, 8)
TRIPLET_EIGHTH = fractions.Fraction(1, 3)
EIGHTH = fractions.Fraction(1, 2)
DOTTED_EIGHTH = fractions.Fraction(3, 4)
TRIPLET_QUARTER = fractions.Fraction(2, 3)
QUARTER = fractions.Fraction(1)
DOTTED_QUARTER = fractions.Fraction(3, 2)
HALF = fractions.Fraction(2)
DOTTED_HALF = fractions.Fraction(3)
WHOLE = fractions.Fraction(4)
