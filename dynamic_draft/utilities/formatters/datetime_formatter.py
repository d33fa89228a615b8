import datetime


def format_datetime_into_isoformat(date_time: datetime.datetime) -> str:
    """Render as UTC with a ``Z`` suffix; naive values are taken to be UTC already."""
    if date_time.tzinfo is None:
        date_time = date_time.replace(tzinfo=datetime.timezone.utc)
    return date_time.astimezone(datetime.timezone.utc).isoformat().replace("+00:00", "Z")
