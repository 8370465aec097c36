"""Serialization utilities."""

from dataclasses import asdict


def _to_json_value(value):
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, dict):
        return {k: _to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    return value


def serialize_dataclass(obj, drop_none: bool = False) -> dict:
    """Serialize a dataclass to a JSON-ready dict.

    Sets become sorted lists so output is stable across runs. With drop_none,
    fields whose value is None are omitted.
    """
    data = {key: _to_json_value(value) for key, value in asdict(obj).items()}
    if drop_none:
        data = {key: value for key, value in data.items() if value is not None}
    return data
