from datetime import datetime, tzinfo


def get_current_datetime(timezone: tzinfo) -> datetime:
    return datetime.now(timezone)
