"""Shared helpers for word normalization."""

from __future__ import annotations

import re

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return the uppercase ASCII letters of ``text``.

    Spaces, hyphens, digits and any non-ASCII letters are dropped, so
    ``"ice-cream"`` becomes ``"ICECREAM"``.
    """

    if not text:
        return ""
    return WORD_RE.sub("", text.strip().upper())


__all__ = ["clean_word"]
