from datetime import datetime, timezone

from .constants import NOT_AVAILABLE, TIMESTAMP_FORMAT


def _is_meaningful(value):
    if value is None:
        return False
    return str(value).strip() != ""


def pick_first_nonempty(*candidates):
    for c in candidates:
        if _is_meaningful(c):
            return str(c).strip()
    return ""


def parse_timestamp(value):
    """Converte ISO-8601 ou epoch (segundos) em datetime; None se inválido."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    text = str(value).strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromtimestamp(float(text), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def format_timestamp(value):
    if value is None:
        return NOT_AVAILABLE
    return value.strftime(TIMESTAMP_FORMAT)


def parse_count(value):
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def format_user_info(user):
    if user.email and user.username:
        return f"{user.username} ({user.email})"
    if user.email:
        return user.email
    if user.username:
        return user.username
    if user.id:
        return f"ID: {user.id}"
    return NOT_AVAILABLE
