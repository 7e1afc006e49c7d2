"""Helpers for parsing and formatting values returned by the Proxmox API."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

_API_ID_PATTERN = re.compile(r"[a-z0-9]+@[a-z0-9]+!([a-z0-9]+)")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_DISK_SIZE = re.compile(r"([0-9]+)([A-Z]*)")

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_DISK_FACTORS = {
    "T": 1024.0,
    "TB": 1024.0,
    "G": 1.0,
    "GB": 1.0,
    "M": 1 / 1024,
    "MB": 1 / 1024,
    "K": 1 / 1048576,
    "KB": 1 / 1048576,
}


def itob(i: int) -> bool:
    """Return True only when ``i`` is exactly 1."""
    return i == 1


def item_in_key_of_array(array: Iterable[Mapping[str, Any]], key: str, value: str) -> bool:
    """Tell whether any item has ``value`` under ``key``, or holds it as an API token.

    A value shaped like ``user@realm!tokenid`` also matches an item whose
    ``tokens`` list contains a token with that id.
    """
    id_match = _API_ID_PATTERN.search(value)
    for item in array:
        if item.get(key) == value:
            return True
        entries = item.get("tokens")
        if entries is None or id_match is None:
            continue
        wanted_id = id_match.group(1)
        if any(wanted_id == field for entry in entries for field in entry.values()):
            return True
    return False


def _typed_value(raw: str) -> Any:
    if _INTEGER.fullmatch(raw):
        number = int(raw)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
    if raw in _TRUE_WORDS:
        return True
    if raw in _FALSE_WORDS:
        return False
    return raw


def parse_sub_conf(element: str, separator: str) -> tuple[str, Any]:
    """Split ``key<separator>value`` and convert the value to int or bool when it is one.

    Returns ``("", None)`` when the separator does not occur.
    """
    if separator not in element:
        return "", None
    parts = element.split(separator)
    return parts[0], _typed_value(parts[1])


def parse_conf(
    kv_string: str,
    conf_separator: str,
    sub_conf_separator: str,
    implicit_first_key: str,
) -> dict[str, Any]:
    """Parse a device string such as ``key1=val1,key2=val2`` into a dict.

    When ``implicit_first_key`` is given and the first element has no ``=``,
    that element is stored under the implicit key.
    """
    conf_list = kv_string.split(conf_separator)
    conf: dict[str, Any] = {}
    if implicit_first_key and "=" not in conf_list[0]:
        conf[implicit_first_key] = conf_list[0]
        conf_list = conf_list[1:]
    for item in conf_list:
        key, value = parse_sub_conf(item, sub_conf_separator)
        conf[key] = value
    return conf


def parse_pm_conf(kv_string: str, implicit_first_key: str) -> dict[str, Any]:
    """Parse a standard comma-separated ``key=value`` configuration string."""
    return parse_conf(kv_string, ",", "=", implicit_first_key)


def disk_size_gb(size: Any) -> float:
    """Convert a disk size such as ``"32G"`` or ``"512M"`` to gigabytes.

    Numbers are returned unchanged; any other type gives 0.0.
    """
    if isinstance(size, str):
        match = _DISK_SIZE.search(size.upper())
        if match is None:
            raise ValueError(f"invalid disk size: {size!r}")
        number = float(match.group(1))
        return number * _DISK_FACTORS.get(match.group(2), 1.0)
    if isinstance(size, (int, float)) and not isinstance(size, bool):
        return float(size)
    return 0.0


def add_to_list(items: str, new_item: str) -> str:
    """Append ``new_item`` to a comma-separated list."""
    return f"{items},{new_item}" if items else new_item


def csv_to_list(csv: str) -> list[str]:
    """Split a comma-separated string."""
    return csv.split(",")


def list_to_csv(items: Any) -> str:
    """Join a list of strings with commas; anything but a list or tuple gives ``""``."""
    if not isinstance(items, (list, tuple)):
        return ""
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"expected a string, got {type(item).__name__}")
    return ",".join(items)