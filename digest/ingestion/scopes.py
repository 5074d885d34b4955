"""Supported draft scopes and their upstream request settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Scope:
    key: str
    label: str
    division: str
    sources: tuple[str, ...]


SCOPES: dict[str, Scope] = {
    "cfb": Scope(
        key="cfb",
        label="College Football (FBS)",
        division="fbs",
        sources=("cfbd:v1 games/box; rankings/v1",),
    ),
    "fcs": Scope(
        key="fcs",
        label="College Football (FCS)",
        division="fcs",
        sources=("cfbd:v1 games/box (fcs)",),
    ),
}


def get_scope(scope_key: str) -> Scope | None:
    """Return the scope for a key (e.g., cfb).

    Returns None when the scope is not supported.
    """

    return SCOPES.get(scope_key.strip().lower())
