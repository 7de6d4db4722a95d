"""Timezone utilities for Indian market time (NSE/BSE)."""

from datetime import datetime

import pytz

IST_TZ = pytz.timezone("Asia/Kolkata")


def now_ist() -> datetime:
    """Return current time in Asia/Kolkata timezone."""
    return datetime.now(IST_TZ)
