"""
OpenF1 API collection paths, relative to the configured base URL.
"""

DEFAULT_OPENF1_BASE_URL = "https://api.openf1.org/v1"

DRIVERS_API_PATH = "/drivers"
SESSIONS_API_PATH = "/sessions"
SESSION_RESULTS_API_PATH = "/session_result"
POSITION_API_PATH = "/position"
LAPS_API_PATH = "/laps"
STINTS_API_PATH = "/stints"
PIT_API_PATH = "/pit"
WEATHER_API_PATH = "/weather"

AI_ANALYZE_PATH = "/analyze"
AI_SECRET_HEADER = "X-Internal-Secret"
