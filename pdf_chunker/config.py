"""Environment-driven defaults for :mod:`pdf_chunker`."""

from __future__ import annotations

import os

PRUNE_ENV_VAR = "PDF_CHUNKER_PRUNE_ORPHANS"
PREFIX_ENV_VAR = "PDF_CHUNKER_PREFIX"
DEFAULT_PREFIX = "chunk"

_FALSE_VALUES = {"0", "false", "no", "off"}


def should_prune_orphans() -> bool:
    """Whether objects orphaned by page removal are dropped before writing.

    Enabled unless ``PDF_CHUNKER_PRUNE_ORPHANS`` is set to a false value
    (``0``, ``false``, ``no``, ``off``); any other value keeps it on.
    """

    value = os.getenv(PRUNE_ENV_VAR)
    if value is None:
        return True
    return value.strip().lower() not in _FALSE_VALUES


def default_prefix() -> str:
    value = os.getenv(PREFIX_ENV_VAR, "").strip()
    return value or DEFAULT_PREFIX
