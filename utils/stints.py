"""
Utility functions for matching laps to tire stints.
"""
from typing import List, Optional
from openf1_pydantic_models.f1_stints import F1Stint


def find_stint_for_lap(lap_number: int, stints: List[F1Stint]) -> Optional[F1Stint]:
    """
    Return the first stint whose closed range [lap_start, lap_end] covers the lap.

    Stints are expected not to overlap. When malformed data makes two stints
    share a lap (typically lap_end of one equal to lap_start of the next), the
    one listed first wins.
    """
    for stint in stints:
        if stint.lap_start <= lap_number <= stint.lap_end:
            return stint
    return None


def compound_for_lap(lap_number: int, stints: List[F1Stint]) -> Optional[str]:
    stint = find_stint_for_lap(lap_number, stints)
    return stint.compound if stint else None
