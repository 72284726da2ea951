"""
Stateless filter and search helpers.

Every helper works on a store's full value sequence, in store order.  The
``empty_result_is_error`` policy decides whether an empty list query is a
``NotFound`` (the historical behaviour, still the default) or simply an
empty list.
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from clinic.results import Result, not_found, ok

V = TypeVar('V')


class QueryEngine:
    def __init__(self, *, empty_result_is_error: bool = True):
        self.empty_result_is_error = empty_result_is_error

    @staticmethod
    def filter(values: Iterable[V], predicate: Callable[[V], bool]) -> list[V]:
        return [v for v in values if predicate(v)]

    @staticmethod
    def first(values: Iterable[V], predicate: Callable[[V], bool]) -> Optional[V]:
        return next((v for v in values if predicate(v)), None)

    @staticmethod
    def name_contains(values: Iterable[V], needle: str) -> list[V]:
        """Case-insensitive substring match against each record's ``name``."""
        needle = (needle or '').lower()
        return [v for v in values if needle in (getattr(v, 'name', '') or '').lower()]

    def collect(self, items: list[V], empty_text: str) -> Result:
        if not items and self.empty_result_is_error:
            return not_found(empty_text)
        return ok(items)

    def search_by_name(self, values: Iterable[V], needle: str, empty_text: str) -> Result:
        return self.collect(self.name_contains(values, needle), empty_text)
