"""NOVA processing group descriptions."""

from __future__ import annotations

UNKNOWN_PROCESSING_LEVEL = "Unknown processing level"


def describe(group: object) -> str:
    """Return the human-readable label for a NOVA group (1-4)."""
    if isinstance(group, bool):
        return UNKNOWN_PROCESSING_LEVEL

    match group:
        case 1:
            return "Unprocessed or minimally processed"
        case 2:
            return "Processed culinary ingredients"
        case 3:
            return "Processed foods"
        case 4:
            return "Ultra-processed foods"
        case _:
            return UNKNOWN_PROCESSING_LEVEL
