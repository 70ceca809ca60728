import math
from datetime import datetime, timezone

# Formatos aceptados además de ISO 8601
DATE_FORMATS = (
    "%Y/%m/%d",
    "%d/%m/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def parse_date(value: str):
    """
    Convierte el texto de 'date:' en un datetime naive (UTC).
    Devuelve None si el texto está vacío o no se puede interpretar.
    """
    value = (value or "").strip()
    if not value:
        return None
    # fromisoformat no acepta "Z" antes de Python 3.11
    if value[-1] in "Zz":
        value = value[:-1] + "+00:00"

    try:
        date_obj = datetime.fromisoformat(value)
    except ValueError:
        date_obj = None
        for fmt in DATE_FORMATS:
            try:
                date_obj = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue

    if date_obj is None:
        return None

    if date_obj.tzinfo is not None:
        date_obj = date_obj.astimezone(timezone.utc).replace(tzinfo=None)
    return date_obj


def _round(value):
    # Mitades hacia arriba (round() redondea al par)
    return math.floor(value + 0.5)


def relative_date(date, now) -> str:
    """
    Texto relativo al estilo "3 days ago" / "in a month".
    Función pura: el llamador decide qué es "ahora".
    """
    if date is None:
        return ""

    seconds = (now - date).total_seconds()
    future = seconds < 0
    seconds = abs(seconds)

    minutes = seconds / 60
    hours = minutes / 60
    days = hours / 24

    if seconds < 45:
        text = "a few seconds"
    elif seconds < 90:
        text = "a minute"
    elif minutes < 45:
        text = f"{_round(minutes)} minutes"
    elif minutes < 90:
        text = "an hour"
    elif hours < 22:
        text = f"{_round(hours)} hours"
    elif hours < 36:
        text = "a day"
    elif days < 26:
        text = f"{_round(days)} days"
    elif days < 45:
        text = "a month"
    elif days < 320:
        text = f"{max(2, _round(days / 30.4))} months"
    elif days < 548:
        text = "a year"
    else:
        text = f"{max(2, _round(days / 365))} years"

    return f"in {text}" if future else f"{text} ago"
