"""Modelos do evento de entrada (Sentry) e da mensagem de saída (Google Chat).

As classes de mensagem serializam com `to_dict()` omitindo campos opcionais
vazios, no formato esperado pelo webhook do Google Chat.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class TranslatorConfig:
    use_rich_cards: bool = False
    process_all_actions: bool = False


@dataclass(frozen=True)
class UserInfo:
    id: str = ""
    username: str = ""
    email: str = ""

    def has_identity(self) -> bool:
        return bool(self.id or self.username or self.email)


@dataclass(frozen=True)
class Tag:
    key: str
    value: str


@dataclass(frozen=True)
class ErrorEvent:
    project: str
    title: str
    level: str = "unknown"
    environment: str = ""
    culprit: str = ""
    url: str = ""
    timestamp: Optional[datetime] = None
    user: UserInfo = field(default_factory=UserInfo)
    priority: str = ""
    short_id: str = ""
    count: int = 0
    status: str = ""
    first_seen: Optional[datetime] = None
    platform: str = ""
    action: str = ""
    tags: tuple = ()


@dataclass
class KeyValue:
    top_label: str
    content: str
    content_multiline: bool = False
    bottom_label: str = ""
    icon: str = ""

    def to_dict(self):
        data = {"topLabel": self.top_label, "content": self.content}
        if self.content_multiline:
            data["contentMultiline"] = True
        if self.bottom_label:
            data["bottomLabel"] = self.bottom_label
        if self.icon:
            data["icon"] = self.icon
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            top_label=data.get("topLabel", ""),
            content=data.get("content", ""),
            content_multiline=bool(data.get("contentMultiline", False)),
            bottom_label=data.get("bottomLabel", ""),
            icon=data.get("icon", ""),
        )


@dataclass
class Button:
    text: str
    url: str

    def to_dict(self):
        return {"textButton": {"text": self.text, "onClick": {"openLink": {"url": self.url}}}}

    @classmethod
    def from_dict(cls, data):
        text_button = data.get("textButton", {})
        open_link = text_button.get("onClick", {}).get("openLink", {})
        return cls(text=text_button.get("text", ""), url=open_link.get("url", ""))


@dataclass
class Widget:
    key_value: Optional[KeyValue] = None
    buttons: List[Button] = field(default_factory=list)

    def to_dict(self):
        data = {}
        if self.key_value is not None:
            data["keyValue"] = self.key_value.to_dict()
        if self.buttons:
            data["buttons"] = [b.to_dict() for b in self.buttons]
        return data

    @classmethod
    def from_dict(cls, data):
        kv = data.get("keyValue")
        return cls(
            key_value=KeyValue.from_dict(kv) if kv is not None else None,
            buttons=[Button.from_dict(b) for b in data.get("buttons", [])],
        )


@dataclass
class Section:
    widgets: List[Widget] = field(default_factory=list)

    def to_dict(self):
        return {"widgets": [w.to_dict() for w in self.widgets]}

    @classmethod
    def from_dict(cls, data):
        return cls(widgets=[Widget.from_dict(w) for w in data.get("widgets", [])])


@dataclass
class CardHeader:
    title: str
    subtitle: str = ""
    image_url: str = ""

    def to_dict(self):
        data = {"title": self.title}
        if self.subtitle:
            data["subtitle"] = self.subtitle
        if self.image_url:
            data["imageUrl"] = self.image_url
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            title=data.get("title", ""),
            subtitle=data.get("subtitle", ""),
            image_url=data.get("imageUrl", ""),
        )


@dataclass
class Card:
    header: CardHeader
    sections: List[Section] = field(default_factory=list)

    def to_dict(self):
        data = {"header": self.header.to_dict()}
        if self.sections:
            data["sections"] = [s.to_dict() for s in self.sections]
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            header=CardHeader.from_dict(data.get("header", {})),
            sections=[Section.from_dict(s) for s in data.get("sections", [])],
        )


@dataclass
class ChatMessage:
    """Mensagem do Google Chat: `text` OU `cards`, nunca os dois."""

    text: str = ""
    cards: List[Card] = field(default_factory=list)

    def __post_init__(self):
        if self.text and self.cards:
            raise ValueError("ChatMessage aceita apenas text ou cards, não ambos")

    @classmethod
    def plain(cls, text: str) -> "ChatMessage":
        return cls(text=text)

    @classmethod
    def card(cls, card: Card) -> "ChatMessage":
        return cls(cards=[card])

    def to_dict(self):
        if self.cards:
            return {"cards": [c.to_dict() for c in self.cards]}
        return {"text": self.text}

    @classmethod
    def from_dict(cls, data):
        cards = [Card.from_dict(c) for c in data.get("cards", [])]
        if cards:
            return cls(cards=cards)
        return cls(text=data.get("text", ""))
