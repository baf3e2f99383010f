"""Placeholder substitution for code templates."""
import re
from typing import Any, Mapping


def placeholder(name: str) -> str:
    """Wrap a variable name as it appears in templates, e.g. ``{:name:}``."""
    return "{:%s:}" % name


def merge_template(template: str, variables: Mapping[str, Any]) -> str:
    """
    Replace every ``{:name:}`` placeholder in a single pass.

    Replaced text is never scanned again and placeholders with no matching
    variable are left as they are. Values are inserted literally.

    Args:
        template: Raw template text
        variables: Mapping of variable name to value

    Returns:
        The merged text
    """
    if not variables:
        return template

    replacements = {placeholder(name): str(value) for name, value in variables.items()}
    # Longest placeholder wins when two start at the same offset
    keys = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))

    return pattern.sub(lambda match: replacements[match.group(0)], template)
