from .constants import LEVEL_EMOJIS, PRIORITY_EMOJIS, KNOWN_LEVELS, KNOWN_PRIORITIES


def _normalize(value):
    if value is None:
        return ""
    return str(value).strip().lower()


def normalize_level(level):
    lowered = _normalize(level)
    return lowered if lowered in KNOWN_LEVELS else "unknown"


def normalize_priority(priority):
    # Prioridade ausente continua vazia para que a linha seja omitida
    lowered = _normalize(priority)
    if lowered == "":
        return ""
    return lowered if lowered in KNOWN_PRIORITIES else "unknown"


def get_level_emoji(level):
    return LEVEL_EMOJIS.get(_normalize(level), LEVEL_EMOJIS["default"])


def get_priority_emoji(priority):
    return PRIORITY_EMOJIS.get(_normalize(priority), PRIORITY_EMOJIS["default"])


def should_process_action(action, config):
    """Filtro de action das issues do Sentry.

    Payloads sem action (formatos legados) sempre passam. Com action, só
    "created" é encaminhada, a menos que `config.process_all_actions` esteja ativo.
    """
    if config.process_all_actions:
        return True
    if not action:
        return True
    return _normalize(action) == "created"
