"""Variable Expander - Pure functions for ${VAR} substitution."""

import re
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from ..errors import ExpansionError

# ${NAME} or $NAME
PLACEHOLDER_PATTERN = re.compile(
    r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}|\$([A-Za-z_][A-Za-z0-9_]*)"
)


def snapshot_environment(env: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """
    Capture a read-only copy of env for one invocation.

    Insertion order is preserved; values are coerced to strings and None
    values are dropped.
    """
    items = {}
    for key, value in (env or {}).items():
        if value is None:
            continue
        items[str(key)] = str(value)
    return MappingProxyType(items)


def find_unresolved(template: str, env: Mapping[str, str]) -> List[str]:
    """Names referenced by template that env does not define, in order of appearance."""
    missing = []
    for match in PLACEHOLDER_PATTERN.finditer(template or ""):
        name = match.group(1) or match.group(2)
        if name not in env and name not in missing:
            missing.append(name)
    return missing


def expand(template: Optional[str], env: Mapping[str, str], strict: bool = False) -> Optional[str]:
    """
    Replace ${NAME} and $NAME placeholders with values from env.

    This is a PURE FUNCTION. Unknown placeholders are left verbatim unless
    strict is set.

    Args:
        template: String to expand (None passes through)
        env: Environment snapshot
        strict: Raise instead of leaving unknown placeholders in place

    Returns:
        Expanded string

    Raises:
        ExpansionError: in strict mode, if any placeholder is unresolved
    """
    if template is None:
        return None

    if strict:
        missing = find_unresolved(template, env)
        if missing:
            raise ExpansionError(missing)

    def replace(match: re.Match) -> str:
        name = match.group(1) or match.group(2)
        value = env.get(name)
        if value is None:
            return match.group(0)
        return value

    return PLACEHOLDER_PATTERN.sub(replace, template)


def expand_all(templates: Optional[Iterable[str]], env: Mapping[str, str], strict: bool = False) -> Optional[List[str]]:
    """Expand every entry of a list (tags); None passes through."""
    if templates is None:
        return None
    return [expand(t, env, strict=strict) for t in templates]
