"""Placeholder expansion for link templates."""

from collections.abc import Mapping
from typing import Any


def expand_vars(template: str, values: Mapping[str, Any]) -> str:
    """Substitute ``{name}`` placeholders in a template.

    Keys are applied in mapping order and only the first occurrence of
    each placeholder is replaced, so ``"{a}-{a}"`` with ``a="x"`` gives
    ``"x-{a}"``. Placeholders with no matching key are left as they are.
    Values are inserted as ``str(value)`` without escaping.
    """
    for name, value in values.items():
        template = template.replace("{" + name + "}", str(value), 1)
    return template
