from .responses import error_response
from .timezones import UTC, ensure_aware, from_epoch_millis, parse_iso, utc_now

__all__ = [
    "error_response",
    "UTC",
    "ensure_aware",
    "from_epoch_millis",
    "parse_iso",
    "utc_now",
]
