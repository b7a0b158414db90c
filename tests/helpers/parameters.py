"""Parameter helpers for pytest-bdd step implementations."""

from __future__ import annotations

import json

_PLACEHOLDER_TOKENS: dict[str, str] = {
    "<space>": " ",
    "<SPACE>": " ",
    "<nl>": "\n",
    "<NL>": "\n",
    "<dq>": '"',
    "<DQ>": '"',
}


def decode_placeholders(value: str) -> str:
    """Expand user-facing placeholder tokens embedded in feature files."""
    result = value
    for token, replacement in _PLACEHOLDER_TOKENS.items():
        result = result.replace(token, replacement)
    return result


def load_value(raw: str) -> object:
    """Return the JSON value written in a feature file step.

    Placeholders are expanded first so string literals can carry double
    quotes without clashing with the step's own quoting.
    """
    return json.loads(decode_placeholders(raw))
