"""Pieces written with Canonic.

- ``canonic.variations.canone_alla_quarta`` - Bach, Goldberg Variations no. 12
"""
