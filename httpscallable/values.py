"""
Dynamically-typed payload values.

Callable payloads and results are JSON-like: None, bool, int, float, str,
lists of values, and str-keyed dicts of values, nested to any depth.
"""

from typing import Any, Union

CallableValue = Union[
    None,
    bool,
    int,
    float,
    str,
    list["CallableValue"],
    dict[str, "CallableValue"],
]

_SCALARS = (bool, int, float, str)


def is_callable_value(value: Any) -> bool:
    """Return True if ``value`` is one of the CallableValue kinds (recursively).

    Tuples are accepted as lists. Dict keys must be strings.
    """
    if value is None or isinstance(value, _SCALARS):
        return True
    if isinstance(value, (list, tuple)):
        return all(is_callable_value(item) for item in value)
    if isinstance(value, dict):
        return all(
            isinstance(key, str) and is_callable_value(item)
            for key, item in value.items()
        )
    return False
