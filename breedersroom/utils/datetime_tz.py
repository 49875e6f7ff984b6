from __future__ import annotations

from datetime import date, datetime, time, timezone

from zoneinfo import ZoneInfo

DEFAULT_TZ = ZoneInfo("Asia/Seoul")


def format_day_date(
    d: date | datetime | str | None,
    *,
    include_time: bool = False,
    tz: ZoneInfo | None = DEFAULT_TZ,
) -> str:
    """Return 'Fri 05 Oct' or with time 'Fri 05 Oct hh:mm'.

    Accepts ISO date/datetime strings (with optional trailing 'Z').
    Aware values are shifted to `tz`; naive ones are taken as UTC.
    """
    if d is None:
        return ""
    if isinstance(d, str):
        s = d.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError:
            return s
    elif isinstance(d, datetime):
        dt = d
    else:
        # Plain dates carry no time of day to shift
        dt = datetime.combine(d, time(0, 0))
        tz = None

    if tz is not None:
        if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(tz)

    label = dt.strftime("%a %d %b")
    if include_time:
        return f"{label} {dt.strftime('%H:%M')}"
    return label
