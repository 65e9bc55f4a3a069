"""Helpers for YAML parsing quirks."""

from typing import Any


def normalize_yaml_keys(data: Any) -> Any:
    """Recursively convert mapping keys to strings.

    YAML 1.1 reads keys such as ``yes``, ``on`` or ``true`` as booleans and
    bare numbers as ints. Path segments are always strings, so every key is
    rewritten with ``str()`` (booleans become ``"True"``/``"False"``). Lists
    are walked so mappings nested inside them are normalized too.

    Args:
        data: Value produced by ``yaml.safe_load``.

    Returns:
        Equivalent structure whose dict keys are all strings.

    Examples:
        >>> normalize_yaml_keys({True: {1: "a"}, "b": [{False: 0}]})
        {'True': {'1': 'a'}, 'b': [{'False': 0}]}
    """
    if isinstance(data, dict):
        return {str(key): normalize_yaml_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [normalize_yaml_keys(item) for item in data]
    return data
