"""Shared type aliases and header helpers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Union

# Header values accepted from callers: scalars or a list of scalars per name
HeaderValue = Union[str, int, float, Sequence[Union[str, int, float]]]
HeaderMapping = Mapping[str, HeaderValue]


def iter_header_items(headers: HeaderMapping | None) -> Iterator[tuple[str, str]]:
    """Yield one ``(name, value)`` pair per header line, values stringified."""
    if not headers:
        return
    for name, value in headers.items():
        if isinstance(value, (list, tuple)):
            for item in value:
                yield name, str(item)
        else:
            yield name, str(value)


def flatten_headers(headers: HeaderMapping | None) -> dict[str, str]:
    """Collapse headers into a plain ``dict[str, str]``.

    Repeated values for the same name are joined with ``", "``.
    """
    flat: dict[str, str] = {}
    for name, value in iter_header_items(headers):
        if name in flat:
            flat[name] = f"{flat[name]}, {value}"
        else:
            flat[name] = value
    return flat
