"""Single-pass {{placeholder}} substitution."""

import re
from typing import Any, Mapping

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z0-9_]+)\s*\}\}")


def render_template(template: str, values: Mapping[str, Any]) -> str:
    """Substitute {{name}} markers in one scan of the template.

    Substituted text is never rescanned, so values containing {{...}} are
    emitted literally. Markers with no entry in ``values`` are left as-is;
    None renders as an empty string.
    """

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in values:
            return match.group(0)
        value = values[name]
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def find_placeholders(template: str) -> list[str]:
    """Placeholder names in order of first appearance."""
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)
