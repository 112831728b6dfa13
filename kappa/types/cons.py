"""Cons cells: the two-slot pairs every Kappa list is built from.

A proper list is a right-nested chain of cells ending in Nil; any other final
cdr makes the chain an improper (dotted) list. Cells may be shared between
several parents, so nothing here assumes the structure is a tree.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from kappa import LispValue
from kappa.errors import KappaMalformedForm
from kappa.types.nil import Nil


class Cons:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
        """Build a chain holding `items`, ending in `tail` (Nil for a proper list)."""
        result = tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __iter__(self) -> Iterator[LispValue]:
        """Yield the car of every cell; an improper tail is not yielded."""
        cell: LispValue = self
        while isinstance(cell, Cons):
            yield cell.car
            cell = cell.cdr

    def last_cdr(self) -> LispValue:
        cell = self
        while isinstance(cell.cdr, Cons):
            cell = cell.cdr
        return cell.cdr

    def is_proper(self) -> bool:
        return self.last_cdr() is Nil

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cons):
            return NotImplemented
        a: LispValue = self
        b: LispValue = other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if a is b:
                return True
            if not _atoms_equal(a.car, b.car):
                return False
            a, b = a.cdr, b.cdr
        if isinstance(a, Cons) or isinstance(b, Cons):
            return False
        return _atoms_equal(a, b)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cons({self.car!r}, {self.cdr!r})"

    def __str__(self) -> str:
        from kappa.printer import to_text
        return to_text(self)


def _atoms_equal(a: LispValue, b: LispValue) -> bool:
    # T must not compare equal to the number 1
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def iter_chain(expr: LispValue, what: str = "list") -> Iterator[LispValue]:
    """Yield the elements of the proper list `expr`.

    Raises KappaMalformedForm when the chain ends in anything but Nil.
    """
    cell = expr
    while isinstance(cell, Cons):
        yield cell.car
        cell = cell.cdr
    if cell is not Nil:
        raise KappaMalformedForm(f"invalid {what}: expected a proper list")
