"""Key/value pair handling shared by the sink."""

from typing import Any, Dict, Sequence


def pairs_to_fields(keys_and_values: Sequence[Any]) -> Dict[str, Any]:
    """Turn ``(k1, v1, k2, v2, ...)`` into an ordered field mapping.

    An odd number of items yields no fields at all. Keys are converted with
    ``str``; a repeated key keeps its last value.
    """

    if len(keys_and_values) % 2:
        return {}
    fields: Dict[str, Any] = {}
    for index in range(0, len(keys_and_values), 2):
        fields[str(keys_and_values[index])] = keys_and_values[index + 1]
    return fields


def join_name(current: str, name: str, separator: str) -> str:
    if current:
        return current + separator + name
    return name
