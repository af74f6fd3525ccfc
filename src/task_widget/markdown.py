"""Markup cleanup for task titles."""

import re

_CALLOUT_TAG = re.compile(r"</?callout>", re.IGNORECASE)
_CHECKBOX = re.compile(r"-\s*\[[xX\s]\]\s*")
_QUOTE_BULLET = re.compile(r">\s*-\s*")
_ANY_TAG = re.compile(r"</?[^>]+>")


def clean_markdown(text: str | None) -> str:
    """Strip callout tags, checkbox markers, quote bullets and leftover tags.

    Returns an empty string for None/empty input; callers pick the placeholder.
    """
    if not text:
        return ""
    text = _CALLOUT_TAG.sub("", text)  # <callout> / </callout>
    text = _CHECKBOX.sub("", text)  # - [ ], - [x], - [X]
    text = _QUOTE_BULLET.sub("", text)  # > -
    text = _ANY_TAG.sub("", text)
    return text.strip()
