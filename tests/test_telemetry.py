"""Tests for the race telemetry merge."""
import asyncio
import logging

import httpx
import pytest

from openf1_pydantic_models.f1_laps import F1LapData
from openf1_pydantic_models.f1_stints import F1Stint
from openf1_pydantic_models.f1_pits import F1PitStop
from openf1_pydantic_models.f1_weather import F1WeatherReading
from utils.errors import UpstreamUnavailable
from utils.telemetry import merge_race_telemetry, get_race_telemetry


def test_single_lap_scenario_omits_unknown_fields():
    """Absent duration, sector 1 and weather are dropped, not null."""
    laps = [F1LapData(lap_number=1, duration_sector_2=38.489, duration_sector_3=32.363)]
    stints = [F1Stint(lap_start=1, lap_end=1, compound="MEDIUM")]

    result = merge_race_telemetry(laps, stints, [], [])

    assert result == {
        "raceSummary": {"totalLaps": 1, "totalPitStops": 0, "compoundsUsed": ["MEDIUM"]},
        "pitStops": [],
        "telemetry": [{"lapNumber": 1, "sector2": 38.489, "sector3": 32.363, "tireCompound": "MEDIUM"}],
    }


def test_weather_follows_inferred_lap_start():
    """Lap 2 has no timestamp; its start is T0 + 90s and picks the 04:01:30 reading."""
    laps = [
        F1LapData(lap_number=1, date_start="2025-03-16T04:00:00+00:00", lap_duration=95.0),
        F1LapData(lap_number=2, lap_duration=90.0),
    ]
    weather = [
        F1WeatherReading(date="2025-03-16T04:00:05+00:00", air_temperature=20.0, is_raining=False),
        F1WeatherReading(date="2025-03-16T04:01:30+00:00", air_temperature=21.0, rainfall=0),
    ]

    result = merge_race_telemetry(laps, [], [], weather)
    lap1, lap2 = result["telemetry"]

    assert lap1["weather"] == {"date": "2025-03-16T04:00:05+00:00", "airTemperature": 20.0, "isRaining": False}
    assert lap2["weather"] == {"date": "2025-03-16T04:01:30+00:00", "airTemperature": 21.0, "isRaining": False}
    assert "tireCompound" not in lap1


def test_lap_without_any_start_has_no_weather():
    laps = [F1LapData(lap_number=1, lap_duration=90.0), F1LapData(lap_number=2, lap_duration=91.0)]
    weather = [F1WeatherReading(date="2025-03-16T04:00:00+00:00", air_temperature=20.0)]

    result = merge_race_telemetry(laps, [], [], weather)

    assert all("weather" not in lap for lap in result["telemetry"])


def test_summary_counts_and_compound_order():
    laps = [F1LapData(lap_number=n, lap_duration=90.0) for n in (1, 2, 3, 3, 4)]
    stints = [
        F1Stint(lap_start=1, lap_end=2, compound="SOFT"),
        F1Stint(lap_start=3, lap_end=3, compound="HARD"),
        F1Stint(lap_start=4, lap_end=9, compound="SOFT"),
    ]
    pits = [
        F1PitStop(lap_number=2, pit_duration=22.0),
        F1PitStop(lap_number=2, pit_duration=23.5, total_duration=25.0),
    ]

    result = merge_race_telemetry(laps, stints, pits, [])

    assert result["raceSummary"] == {"totalLaps": 5, "totalPitStops": 2, "compoundsUsed": ["SOFT", "HARD"]}
    assert len(result["telemetry"]) == result["raceSummary"]["totalLaps"]
    # Repeated lap numbers pass through untouched
    assert [lap["lapNumber"] for lap in result["telemetry"]] == [1, 2, 3, 3, 4]
    assert result["pitStops"] == [
        {"lapNumber": 2, "duration": 22.0},
        {"lapNumber": 2, "duration": 23.5, "totalDuration": 25.0},
    ]


def test_empty_inputs():
    assert merge_race_telemetry([], [], [], []) == {
        "raceSummary": {"totalLaps": 0, "totalPitStops": 0, "compoundsUsed": []},
        "pitStops": [],
        "telemetry": [],
    }


def test_get_race_telemetry_fetches_all_collections(make_client):
    """Laps, stints and pits are filtered by driver; weather by session only."""
    calls = []
    client = make_client({
        "laps": [{"session_key": 9693, "driver_number": 1, "lap_number": 1,
                  "date_start": "2025-03-16T04:00:00+00:00", "lap_duration": 98.1}],
        "stints": [{"session_key": 9693, "driver_number": 1, "lap_start": 1, "lap_end": 20, "compound": "SOFT"}],
        "pit": [],
        "weather": [{"session_key": 9693, "date": "2025-03-16T04:00:30+00:00", "track_temperature": 33.0}],
    }, calls)

    result = asyncio.run(get_race_telemetry(client, 9693, 1))

    assert result["telemetry"] == [{
        "lapNumber": 1,
        "lapDuration": 98.1,
        "tireCompound": "SOFT",
        "weather": {"date": "2025-03-16T04:00:30+00:00", "trackTemperature": 33.0},
    }]
    params = {r.url.path.rsplit("/", 1)[-1]: dict(r.url.params) for r in calls}
    assert params["laps"] == {"session_key": "9693", "driver_number": "1"}
    assert params["stints"] == {"session_key": "9693", "driver_number": "1"}
    assert params["pit"] == {"session_key": "9693", "driver_number": "1"}
    assert params["weather"] == {"session_key": "9693"}


@pytest.mark.parametrize("failing", ["laps", "stints", "pit", "weather"])
def test_any_failed_fetch_aborts_merge(make_client, failing):
    """One failing collection fails the whole call, naming that collection."""
    routes = {
        "laps": [{"lap_number": 1, "lap_duration": 90.0}],
        "stints": [],
        "pit": [],
        "weather": [],
    }
    routes[failing] = httpx.Response(500, text="boom")
    client = make_client(routes)

    with pytest.raises(UpstreamUnavailable) as exc_info:
        asyncio.run(get_race_telemetry(client, 9693, 1))

    assert exc_info.value.collection == failing
    assert exc_info.value.upstream_status == 500
    assert exc_info.value.status_code == 500


def test_transport_error_aborts_merge(make_client):
    client = make_client({
        "laps": [],
        "stints": [],
        "pit": httpx.ConnectError("connection refused"),
        "weather": [],
    })

    with pytest.raises(UpstreamUnavailable) as exc_info:
        asyncio.run(get_race_telemetry(client, 9693, 1))

    assert exc_info.value.collection == "pit"
    assert exc_info.value.status_code == 502


def test_short_fraction_timestamps_still_match_weather():
    """Lap and weather dates with two-digit fractions are parsed, so lap 2 gets weather too."""
    laps = [
        F1LapData(lap_number=1, date_start="2025-03-16T04:00:00.12+00:00", lap_duration=90.0),
        F1LapData(lap_number=2, lap_duration=90.0),
    ]
    weather = [
        F1WeatherReading(date="2025-03-16T04:00:00.5+00:00", air_temperature=20.0),
        F1WeatherReading(date="2025-03-16T04:01:29.99+00:00", air_temperature=21.0),
    ]

    result = merge_race_telemetry(laps, [], [], weather)

    assert [lap["weather"]["airTemperature"] for lap in result["telemetry"]] == [20.0, 21.0]


def test_pit_lookup_only_reported_in_debug_log(caplog):
    """Duplicate pit laps collapse in the debug line but not in the summary."""
    pits = [F1PitStop(lap_number=12), F1PitStop(lap_number=12), F1PitStop(lap_number=30)]

    with caplog.at_level(logging.DEBUG, logger="utils.telemetry"):
        result = merge_race_telemetry([], [], pits, [])

    assert result["raceSummary"]["totalPitStops"] == 3
    assert len(result["pitStops"]) == 3
    assert "3 pit records on 2 distinct laps" in caplog.text
