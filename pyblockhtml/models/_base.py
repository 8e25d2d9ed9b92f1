"""Shared pydantic base for the JSON document models."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

_EXTRA_MODES = frozenset({"allow", "forbid", "ignore"})
_EXTRA_ALIASES = {
    **dict.fromkeys(("1", "true", "yes", "on", "strict"), "forbid"),
    **dict.fromkeys(("0", "false", "no", "off", "lenient"), "ignore"),
}


def _env_extra_mode(default: str = "forbid") -> str:
    """Read PYBLOCKHTML_EXTRA; unrecognised values fall back to ``default``."""
    raw = (os.getenv("PYBLOCKHTML_EXTRA") or default).strip().lower()
    if raw in _EXTRA_MODES:
        return raw
    return _EXTRA_ALIASES.get(raw, default)


class WireModel(BaseModel):
    """Immutable base for block and span payloads.

    Unknown fields are rejected unless PYBLOCKHTML_EXTRA says otherwise; the
    variable is read once, at import.
    """

    model_config = ConfigDict(extra=_env_extra_mode(), frozen=True)


__all__ = ["WireModel", "_env_extra_mode"]
