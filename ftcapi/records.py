"""
Helpers shared by the resource modules.

The get_* readers pull one key out of a decoded JSON object, fall back to a
default when the key is missing or null, and raise DecodeError when the value
has the wrong JSON type. to_dict goes the other way, for printing records.
"""
import dataclasses
import datetime as dt
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ftcapi.errors import DecodeError
from ftcapi.timefmt import format_time

T = TypeVar("T")


def expect_dict(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object for {what}, got {_json_type(data)}")
    return data


def expect_list(data: Any, what: str) -> List[Any]:
    if not isinstance(data, list):
        raise DecodeError(f"expected a JSON array for {what}, got {_json_type(data)}")
    return data


def get_str(d: Dict[str, Any], key: str, default: str = "") -> str:
    value = d.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise _wrong_type(key, "string", value)
    return value


def get_opt_str(d: Dict[str, Any], key: str) -> Optional[str]:
    return get_str(d, key) if d.get(key) is not None else None


def get_int(d: Dict[str, Any], key: str, default: int = 0) -> int:
    value = d.get(key)
    if value is None:
        return default
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise _wrong_type(key, "integer", value)
    return value


def get_opt_int(d: Dict[str, Any], key: str) -> Optional[int]:
    return get_int(d, key) if d.get(key) is not None else None


def get_float(d: Dict[str, Any], key: str, default: float = 0.0) -> float:
    value = d.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _wrong_type(key, "number", value)
    return float(value)


def get_bool(d: Dict[str, Any], key: str, default: bool = False) -> bool:
    value = d.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise _wrong_type(key, "boolean", value)
    return value


def get_opt_bool(d: Dict[str, Any], key: str) -> Optional[bool]:
    return get_bool(d, key) if d.get(key) is not None else None


def get_list(d: Dict[str, Any], key: str, parse: Callable[[Any], T]) -> List[T]:
    value = d.get(key)
    if value is None:
        return []
    return [parse(item) for item in expect_list(value, key)]


def to_dict(record: Any) -> Any:
    """
    Convert a record (or list of records) back to JSON-ready data with the
    API's camelCase keys. Datetimes use the server's timestamp format.
    """
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        out = {}
        for f in dataclasses.fields(record):
            key = f.metadata.get("json") or _camel(f.name)
            out[key] = to_dict(getattr(record, f.name))
        return out
    if isinstance(record, list):
        return [to_dict(item) for item in record]
    if isinstance(record, dt.datetime):
        return format_time(record)
    if isinstance(record, Enum):
        return record.value
    return record


def _camel(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(p[:1].upper() + p[1:] for p in rest)


def _wrong_type(key: str, expected: str, value: Any) -> DecodeError:
    return DecodeError(f"field {key!r}: expected {expected}, got {_json_type(value)}")


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
