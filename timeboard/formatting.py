"""Display helpers for durations."""


def format_clock(seconds: int) -> str:
    """Format seconds as HH:MM:SS."""
    seconds = max(0, int(seconds))
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours:02d}:{minutes:02d}:{seconds % 60:02d}"


def humanize_duration(seconds: float) -> str:
    """Approximate, human readable duration ("a few seconds", "3 hours").

    Thresholds round up to the next unit early, so 50 minutes reads as
    "an hour" and 23 hours as "a day".
    """
    seconds = abs(seconds)
    minutes = round(seconds / 60)
    hours = round(seconds / 3600)
    days = round(seconds / 86400)

    if seconds < 45:
        return "a few seconds"
    if seconds < 90:
        return "a minute"
    if minutes < 45:
        return f"{minutes} minutes"
    if minutes < 90:
        return "an hour"
    if hours < 22:
        return f"{hours} hours"
    if hours < 36:
        return "a day"
    if days < 26:
        return f"{days} days"
    if days < 45:
        return "a month"
    return f"{round(days / 30)} months"


def entry_row(entry, directory, tz=None):
    """Table cells for one entry: project, description, duration, start date.

    The date is taken in ``tz`` (system local time when None), the same zone
    the charts bucket by.
    """
    return (
        directory.resolve(entry.project_id),
        entry.description,
        humanize_duration(entry.duration_seconds),
        entry.start.astimezone(tz).strftime('%Y-%m-%d'),
    )
