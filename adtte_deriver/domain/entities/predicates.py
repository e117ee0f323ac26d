"""Row predicates used to filter candidate source rows.

A predicate is any callable taking one row (a ``pandas.Series``) and
returning a truth value. Predicates must be free of side effects; the
collector may evaluate them from several worker threads at once.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pandas as pd

RowPredicate = Callable[[pd.Series], bool]


class ColumnEquals:
    """Predicate that holds when every named column equals its literal.

    Unlike a bare lambda this keeps its criteria inspectable, which lets
    endpoint listings show the filter that was configured.
    """

    __slots__ = ("criteria",)

    def __init__(self, criteria: dict[str, object]) -> None:
        if not criteria:
            raise ValueError("column_equals requires at least one criterion")
        self.criteria = dict(criteria)

    def __call__(self, row: pd.Series[Any]) -> bool:
        for column, expected in self.criteria.items():
            if column not in row.index:
                raise KeyError(f"Column {column!r} not present in row")
            value = row[column]
            if pd.isna(value) or value != expected:
                return False
        return True

    def describe(self) -> str:
        return " & ".join(f"{col} == {val!r}" for col, val in self.criteria.items())

    def __repr__(self) -> str:
        return f"ColumnEquals({self.criteria!r})"


class AllOf:
    __slots__ = ("predicates",)

    def __init__(self, predicates: tuple[RowPredicate, ...]) -> None:
        self.predicates = predicates

    def __call__(self, row: pd.Series[Any]) -> bool:
        return all(predicate(row) for predicate in self.predicates)

    def describe(self) -> str:
        return " & ".join(describe_predicate(p) for p in self.predicates)


def column_equals(**criteria: object) -> ColumnEquals:
    return ColumnEquals(criteria)


def all_of(*predicates: RowPredicate) -> AllOf:
    return AllOf(predicates)


def describe_predicate(predicate: RowPredicate | None) -> str:
    if predicate is None:
        return "(all rows)"
    describe = getattr(predicate, "describe", None)
    if callable(describe):
        return str(describe())
    return getattr(predicate, "__name__", repr(predicate))
