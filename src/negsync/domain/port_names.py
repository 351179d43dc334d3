"""Port -> name associations and the set algebra used to reconcile them.

A ``PortNameMap`` associates a service port with the name of the network
endpoint group (or target port) serving it. Reconciliation treats the map as
a set of ``(port, name)`` pairs:

- ``union`` merges two maps; on a port collision the right operand wins.
- ``difference`` keeps the pairs of the left operand that are not *identical*
  pairs of the right operand. A port mapped to a different name on the right
  is kept, so a renamed NEG is never silently dropped from a delta.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import overload


class PortNameMap(Mapping[int, str]):
    """Read-only mapping of port number to name.

    Operations return new instances; the receiver is never mutated.
    """

    __slots__ = ("_entries",)

    _entries: dict[int, str]

    @overload
    def __init__(self) -> None: ...
    @overload
    def __init__(self, entries: Mapping[int, str], /) -> None: ...
    @overload
    def __init__(self, entries: Iterable[tuple[int, str]], /) -> None: ...

    def __init__(
        self,
        entries: Mapping[int, str] | Iterable[tuple[int, str]] = (),
        /,
    ) -> None:
        self._entries = dict(entries)

    def __getitem__(self, port: int) -> str:
        return self._entries[port]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"

    def union(self, other: Mapping[int, str]) -> PortNameMap:
        """Return every pair of ``self`` and ``other``; ``other`` wins on a shared port."""

        return PortNameMap({**self._entries, **other})

    def difference(self, other: Mapping[int, str]) -> PortNameMap:
        """Return the pairs of ``self`` that ``other`` does not hold verbatim.

        Matching is on port *and* name: ``{80: "a"} - {80: "b"} == {80: "a"}``.
        """

        others = other.items()
        return PortNameMap(pair for pair in self._entries.items() if pair not in others)

    def __or__(self, other: object) -> PortNameMap:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other: object) -> PortNameMap:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.difference(other)

    def __ror__(self, other: object) -> PortNameMap:
        if not isinstance(other, Mapping):
            return NotImplemented
        return PortNameMap(other).union(self)

    def __rsub__(self, other: object) -> PortNameMap:
        if not isinstance(other, Mapping):
            return NotImplemented
        return PortNameMap(other).difference(self)


def union(left: Mapping[int, str], right: Mapping[int, str]) -> PortNameMap:
    return PortNameMap(left).union(right)


def difference(left: Mapping[int, str], right: Mapping[int, str]) -> PortNameMap:
    return PortNameMap(left).difference(right)
