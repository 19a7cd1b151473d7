"""Classify the loosely-typed ``content`` field carried by agent messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple, Union

_MISSING = object()


@dataclass(frozen=True)
class TextBlock:
    """A content block that carries text, either bare or under a ``text`` field."""

    text: str

    @property
    def char_count(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class UnknownBlock:
    """Images, tool calls and anything else without countable text."""

    @property
    def char_count(self) -> int:
        return 0


ContentBlock = Union[TextBlock, UnknownBlock]


@dataclass(frozen=True)
class TextContent:
    text: str

    @property
    def char_count(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class BlockListContent:
    blocks: Tuple[ContentBlock, ...] = field(default_factory=tuple)

    @property
    def char_count(self) -> int:
        return sum(block.char_count for block in self.blocks)


@dataclass(frozen=True)
class UnknownContent:
    @property
    def char_count(self) -> int:
        return 0


MessageContent = Union[TextContent, BlockListContent, UnknownContent]


def get_field(message: Any, name: str) -> Any:
    """Read *name* from a mapping or attribute-style message, or ``None``."""

    try:
        if isinstance(message, Mapping):
            return message.get(name)
        return getattr(message, name, None)
    except Exception:
        return None


def _block_text(block: Any) -> Any:
    try:
        if isinstance(block, Mapping):
            return block.get("text", _MISSING)
        return getattr(block, "text", _MISSING)
    except Exception:
        return _MISSING


def parse_block(block: Any) -> ContentBlock:
    if isinstance(block, str):
        return TextBlock(block)
    if block is None or isinstance(block, (bytes, int, float, list, tuple)):
        return UnknownBlock()
    text = _block_text(block)
    if text is _MISSING:
        return UnknownBlock()
    if text is None:
        return TextBlock("")
    try:
        return TextBlock(str(text))
    except Exception:
        return UnknownBlock()


def parse_content(raw: Any) -> MessageContent:
    """Map a raw content value onto one of the known content variants."""

    if isinstance(raw, str):
        return TextContent(raw)
    if isinstance(raw, (list, tuple)):
        return BlockListContent(tuple(parse_block(block) for block in raw))
    return UnknownContent()


def message_content(message: Any) -> MessageContent:
    return parse_content(get_field(message, "content"))


__all__ = [
    "BlockListContent",
    "ContentBlock",
    "MessageContent",
    "TextBlock",
    "TextContent",
    "UnknownBlock",
    "UnknownContent",
    "get_field",
    "message_content",
    "parse_block",
    "parse_content",
]
