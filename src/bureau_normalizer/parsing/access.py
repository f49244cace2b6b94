"""Safe navigation over untyped bureau documents."""

from typing import Any, Mapping


def dig(node: Any, *path: str) -> Any:
    """
    Follow path keys through nested mappings.
    Returns None as soon as a segment is missing or a node is not a mapping.
    """
    current = node
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def dig_mapping(node: Any, *path: str) -> Mapping[str, Any]:
    """Like dig, but substitutes an empty mapping for anything that is not one."""
    found = dig(node, *path)
    return found if isinstance(found, Mapping) else {}
