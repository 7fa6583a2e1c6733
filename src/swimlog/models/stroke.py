"""Strokes and standard practice distances."""

from enum import StrEnum


class Stroke(StrEnum):
    """Swim style of a recorded time.

    Entries store the stroke as plain text; this enum lists the values the
    entry forms offer and is not enforced on import.
    """

    FREESTYLE = "Freestyle"
    BACKSTROKE = "Backstroke"
    BREASTSTROKE = "Breaststroke"
    BUTTERFLY = "Butterfly"
    IM = "IM"


# Distances (meters) offered by the single-entry form
STANDARD_DISTANCES: tuple[int, ...] = (25, 50, 100, 200, 400, 800, 1500)
