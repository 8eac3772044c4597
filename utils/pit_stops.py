"""
Utility functions for correlating pit stops with laps.
"""
from typing import Dict, List
from openf1_pydantic_models.f1_pits import F1PitStop
from api_pydantic_models.telemetry import PitStopInfo


def build_pit_lookup(pit_stops: List[F1PitStop]) -> Dict[int, F1PitStop]:
    """Map lap number to pit stop. A later record for the same lap replaces an earlier one."""
    pit_by_lap: Dict[int, F1PitStop] = {}
    for pit in pit_stops:
        pit_by_lap[pit.lap_number] = pit
    return pit_by_lap


def build_pit_stop_entries(pit_stops: List[F1PitStop]) -> List[PitStopInfo]:
    """
    One entry per pit record in upstream order.
    Unlike build_pit_lookup, duplicates on the same lap are all kept.
    """
    return [
        PitStopInfo(
            lap_number=pit.lap_number,
            duration=pit.pit_duration,
            total_duration=pit.total_duration,
        )
        for pit in pit_stops
    ]
