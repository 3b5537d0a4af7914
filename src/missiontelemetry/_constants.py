"""Internal constants shared across the library."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("missiontelemetry")
except PackageNotFoundError:
    __version__ = "0+local"

USER_AGENT = f"missiontelemetry/{__version__}"

# ------------------------------------------------------------------
# Provider endpoints
# ------------------------------------------------------------------

CELESTRAK_ISS_TLE_URL = "https://celestrak.org/NORAD/elements/gp.php?NAME=ISS%20(ZARYA)&FORMAT=TLE"
OPENSKY_STATES_URL = "https://opensky-network.org/api/states/all"
AISHUB_URL = "https://data.aishub.net/ws.php"

DEFAULT_CONNECT_TIMEOUT: float = 8.0
DEFAULT_READ_TIMEOUT: float = 8.0

# ------------------------------------------------------------------
# Driver periods and history resolution
# ------------------------------------------------------------------

DEFAULT_TICK_INTERVAL: float = 1.0
DEFAULT_POLL_INTERVAL: float = 15.0
HISTORY_MAX_POINTS: int = 720
HISTORY_STEP_MS: int = 60 * 60 * 1000

# ------------------------------------------------------------------
# Orbital / nautical conversions
# ------------------------------------------------------------------

EARTH_RADIUS_KM = 6371.0
ISS_ASSUMED_ALTITUDE_KM = 420.0
ISS_CABIN_TEMPERATURE_C = -10.0
SECONDS_PER_DAY = 86400.0
KNOTS_TO_MS = 0.514444

# ------------------------------------------------------------------
# Display formats
# ------------------------------------------------------------------

VALUE_FORMAT = "{:.2f}"
ALERT_TIME_FORMAT = "%H:%M:%S"
CSV_TIME_FORMAT = "%Y-%m-%d %H:%M"
CSV_HEADER: tuple[str, ...] = ("timestamp", "battery", "temperature", "signal", "velocity")
