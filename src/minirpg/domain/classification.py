"""End-of-run tier classification."""
from __future__ import annotations

from minirpg.core.types import Tier

TIER_HEADLINES: dict[Tier, str] = {
    "PRO": "You are a machine!",
    "PARTIAL": "You only made it halfway!",
    "LOSER": "Better luck next time!",
}


def classify(battles_won: int, total_encounters: int) -> Tier:
    """Map the number of won encounters to a tier."""
    if total_encounters <= 0:
        raise ValueError("total_encounters must be positive.")
    if not 0 <= battles_won <= total_encounters:
        raise ValueError("battles_won must be between 0 and total_encounters.")
    if battles_won == total_encounters:
        return "PRO"
    if battles_won > 0:
        return "PARTIAL"
    return "LOSER"
