from .constants import CARD_ROWS, SENTRY_BUTTON_TEXT
from .detection import get_level_emoji, get_priority_emoji
from .models import Button, Card, CardHeader, ChatMessage, KeyValue, Section, Widget
from .utils import format_timestamp, format_user_info


def _format_priority(priority):
    return f"{get_priority_emoji(priority)} {priority.upper()}"


def build_plain_text(event):
    emoji = get_level_emoji(event.level)

    parts = [f"{emoji} *Alerta Sentry* - *{event.project}* {emoji}\n"]
    parts.append(f"⚠️ {event.title}")
    parts.append(f"*Nível:* {event.level.upper()}")

    if event.environment:
        parts.append(f"*Ambiente:* {event.environment}")
    if event.culprit:
        parts.append(f"*Origem:* {event.culprit}")
    if event.priority:
        parts.append(f"*Prioridade:* {_format_priority(event.priority)}")
    if event.platform:
        parts.append(f"*Plataforma:* {event.platform}")
    if event.count > 0:
        parts.append(f"*Ocorrências:* {event.count}")
    if event.status:
        parts.append(f"*Status:* {event.status}")
    if event.first_seen is not None:
        parts.append(f"*Primeira ocorrência:* {format_timestamp(event.first_seen)}")
    if event.user.has_identity():
        parts.append(f"*Usuário:* {format_user_info(event.user)}")

    # URL sempre na última linha
    parts.append(f"\n{event.url}")
    return "\n".join(parts)


def _row(key, content, multiline=False):
    row = CARD_ROWS[key]
    return Widget(key_value=KeyValue(
        top_label=row["label"],
        content=content,
        content_multiline=multiline,
        icon=row["icon"],
    ))


def build_card_widgets(event):
    widgets = []
    if event.short_id:
        widgets.append(_row("short_id", event.short_id))
    if event.project:
        widgets.append(_row("project", event.project))
    widgets.append(_row("level", event.level.upper()))
    if event.priority:
        widgets.append(_row("priority", _format_priority(event.priority)))
    if event.platform:
        widgets.append(_row("platform", event.platform))
    if event.culprit:
        widgets.append(_row("culprit", event.culprit, multiline=True))
    if event.count > 0:
        widgets.append(_row("count", str(event.count)))
    if event.status:
        widgets.append(_row("status", event.status))

    timestamp = event.timestamp or event.first_seen
    if timestamp is not None:
        widgets.append(_row("timestamp", format_timestamp(timestamp)))

    widgets.append(Widget(buttons=[Button(text=SENTRY_BUTTON_TEXT, url=event.url)]))
    return widgets


def build_card(event):
    emoji = get_level_emoji(event.level)
    card = Card(
        header=CardHeader(title=f"{emoji} Alerta Sentry", subtitle=event.title),
        sections=[Section(widgets=build_card_widgets(event))],
    )
    return ChatMessage.card(card)


def build_message(event, config):
    if config.use_rich_cards:
        return build_card(event)
    return ChatMessage.plain(build_plain_text(event))
