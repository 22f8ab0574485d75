from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from typing import Callable, Optional

Update = Callable[["TokenRecord"], "TokenRecord"]


@dataclass(frozen=True)
class TokenRecord:
    """
    What a verification service stores per user: the locked key, the next
    expected counter and the number of consecutive failed attempts.
    """

    uid: Optional[str] = None
    locked_key: Optional[bytes] = None
    counter: int = 0
    failures: int = 0

    def with_uid(self, uid: str) -> TokenRecord:
        return replace(self, uid=uid)

    def with_locked_key(self, locked_key: bytes) -> TokenRecord:
        return replace(self, locked_key=locked_key)

    def with_counter(self, counter: int) -> TokenRecord:
        return replace(self, counter=counter)

    def with_failures(self, failures: int) -> TokenRecord:
        return replace(self, failures=failures)

    def apply(self, *updates: Update) -> TokenRecord:
        """Applies each update in order, left to right."""
        return reduce(lambda record, update: update(record), updates, self)


def uid(value: str) -> Update:
    return lambda record: record.with_uid(value)


def locked_key(value: bytes) -> Update:
    return lambda record: record.with_locked_key(value)


def counter(value: int) -> Update:
    return lambda record: record.with_counter(value)


def failures(value: int) -> Update:
    return lambda record: record.with_failures(value)


def build(*updates: Update) -> TokenRecord:
    """
    Builds a record from a fresh default by applying ``updates``::

        build(uid("alice"), locked_key(lkey))
    """
    return TokenRecord().apply(*updates)
