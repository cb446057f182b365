"""Normaliza os formatos de webhook do Sentry em um único `ErrorEvent`.

Formatos suportados:
- issue webhook (integração): {"action", "data": {"issue": {...}}} (canônico)
- alerta de evento: {"action": "triggered", "data": {"event": {...}}}
- plugin legado: {"project", "message", "url", "event": {...}}
"""
from .detection import normalize_level, normalize_priority
from .models import ErrorEvent, Tag, UserInfo
from .utils import parse_count, parse_timestamp, pick_first_nonempty


def _as_dict(value):
    return value if isinstance(value, dict) else {}


def extract_tags(raw_tags):
    # Sentry envia tags como [["k", "v"]], [{"key": k, "value": v}] ou dict
    tags = []
    if isinstance(raw_tags, dict):
        for key, value in raw_tags.items():
            tags.append(Tag(str(key), "" if value is None else str(value)))
        return tuple(tags)
    if not isinstance(raw_tags, list):
        return ()
    for item in raw_tags:
        if isinstance(item, dict) and 'key' in item:
            value = item.get('value')
            tags.append(Tag(str(item['key']), "" if value is None else str(value)))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            tags.append(Tag(str(item[0]), "" if item[1] is None else str(item[1])))
    return tuple(tags)


def extract_user(raw_user):
    user = _as_dict(raw_user)
    return UserInfo(
        id=pick_first_nonempty(user.get('id')),
        username=pick_first_nonempty(user.get('username'), user.get('name')),
        email=pick_first_nonempty(user.get('email')),
    )


def _tag_value(tags, key):
    for t in tags:
        if t.key == key:
            return t.value
    return ""


def detect_payload_kind(payload):
    data = _as_dict(payload.get('data'))
    if isinstance(data.get('issue'), dict):
        return 'issue'
    if isinstance(data.get('event'), dict):
        return 'event_alert'
    return 'legacy'


def normalize_issue_payload(payload):
    issue = _as_dict(_as_dict(payload.get('data')).get('issue'))
    project = _as_dict(issue.get('project'))
    metadata = _as_dict(issue.get('metadata'))
    tags = extract_tags(issue.get('tags'))

    return ErrorEvent(
        project=pick_first_nonempty(project.get('name'), project.get('slug')),
        title=pick_first_nonempty(issue.get('title'), metadata.get('title'), metadata.get('value')),
        level=normalize_level(issue.get('level')),
        environment=pick_first_nonempty(issue.get('environment'), _tag_value(tags, 'environment')),
        culprit=pick_first_nonempty(issue.get('culprit')),
        url=pick_first_nonempty(issue.get('web_url'), issue.get('permalink'), issue.get('url')),
        timestamp=parse_timestamp(issue.get('lastSeen')),
        user=extract_user(issue.get('user')),
        priority=normalize_priority(issue.get('priority')),
        short_id=pick_first_nonempty(issue.get('shortId')),
        count=parse_count(issue.get('count')),
        status=pick_first_nonempty(issue.get('status')),
        first_seen=parse_timestamp(issue.get('firstSeen')),
        platform=pick_first_nonempty(issue.get('platform'), project.get('platform')),
        action=pick_first_nonempty(payload.get('action')),
        tags=tags,
    )


def normalize_event_alert_payload(payload):
    data = _as_dict(payload.get('data'))
    event = _as_dict(data.get('event'))
    tags = extract_tags(event.get('tags'))

    # "triggered" não é ciclo de vida de issue; o filtro de action não se aplica
    return ErrorEvent(
        project=pick_first_nonempty(
            event.get('project_name'),
            event.get('project_slug'),
            payload.get('project_name'),
        ),
        title=pick_first_nonempty(event.get('title'), event.get('message')),
        level=normalize_level(event.get('level')),
        environment=pick_first_nonempty(event.get('environment'), _tag_value(tags, 'environment')),
        culprit=pick_first_nonempty(event.get('culprit')),
        url=pick_first_nonempty(event.get('web_url'), event.get('issue_url'), event.get('url')),
        timestamp=parse_timestamp(event.get('datetime') or event.get('timestamp')),
        user=extract_user(event.get('user')),
        platform=pick_first_nonempty(event.get('platform'), _tag_value(tags, 'platform')),
        tags=tags,
    )


def normalize_legacy_payload(payload):
    event = _as_dict(payload.get('event'))
    tags = extract_tags(payload.get('tags') or event.get('tags'))

    return ErrorEvent(
        project=pick_first_nonempty(payload.get('project_name'), payload.get('project')),
        title=pick_first_nonempty(event.get('title'), payload.get('message')),
        level=normalize_level(event.get('level') or payload.get('level')),
        environment=pick_first_nonempty(
            payload.get('environment'), event.get('environment'), _tag_value(tags, 'environment')
        ),
        culprit=pick_first_nonempty(payload.get('culprit'), event.get('culprit')),
        url=pick_first_nonempty(payload.get('url')),
        timestamp=parse_timestamp(payload.get('timestamp') or event.get('timestamp')),
        user=extract_user(payload.get('user') or event.get('user')),
        platform=pick_first_nonempty(event.get('platform'), _tag_value(tags, 'platform')),
        tags=tags,
    )


def normalize_payload(payload):
    kind = detect_payload_kind(payload)
    if kind == 'issue':
        return normalize_issue_payload(payload)
    if kind == 'event_alert':
        return normalize_event_alert_payload(payload)
    return normalize_legacy_payload(payload)
