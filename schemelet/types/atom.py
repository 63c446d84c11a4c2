from __future__ import annotations
import sys


class Atom:
    """A bare symbolic identifier, e.g. ``car``, ``+`` or ``string<?``."""

    __slots__ = ("_name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self._name = sys.intern(name)

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self._name == other._name

    def __hash__(self) -> int:
        return hash(("atom", self._name))

    def __repr__(self) -> str:
        return f"Atom({self._name!r})"

    def __str__(self) -> str:
        return self._name
