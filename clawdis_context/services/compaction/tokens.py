from __future__ import annotations

import math
from typing import Any, Iterable

from .content import message_content

CHARS_PER_TOKEN = 4


def count_message_chars(messages: Iterable[Any]) -> int:
    return sum(message_content(message).char_count for message in messages)


def estimate_message_tokens(messages: Iterable[Any]) -> int:
    """Rough token count for *messages* (~4 characters per token).

    Unrecognised content shapes count as zero rather than raising.
    """

    return math.ceil(count_message_chars(messages) / CHARS_PER_TOKEN)


__all__ = ["CHARS_PER_TOKEN", "count_message_chars", "estimate_message_tokens"]
