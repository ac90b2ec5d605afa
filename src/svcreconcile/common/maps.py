"""Mapping helpers shared by the reconciler."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def merge_preserving_existing_keys(
    dest: Mapping[str, str] | None,
    src: Mapping[str, str] | None,
) -> dict[str, str]:
    """Return ``dest`` extended with the keys of ``src`` it does not already hold.

    Values already present in ``dest`` always win. Neither argument is modified.
    """

    merged = dict(dest or {})
    for key, value in (src or {}).items():
        if key not in merged:
            merged[key] = value
    return merged
