"""
Tagged results returned by every service operation.

A :class:`Result` carries either a success value (a record, a list of
records or a :class:`Message`) or an error :class:`Message`.  The set of
message kinds is closed; ``PAYMENT_FAILED`` and ``PAYMENT_COMPLETED``
belong to the ledger integration and are never produced by the record
services, but they stay in the enum so that clients decoding the full tag
set keep working.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


class MessageKind(enum.Enum):
    SUCCESS = 'Success'
    ERROR = 'Error'
    NOT_FOUND = 'NotFound'
    INVALID_PAYLOAD = 'InvalidPayload'
    PAYMENT_FAILED = 'PaymentFailed'
    PAYMENT_COMPLETED = 'PaymentCompleted'


@dataclass(frozen=True)
class Message:
    kind: MessageKind
    text: str

    def to_dict(self) -> dict[str, str]:
        return {'kind': self.kind.value, 'message': self.text}


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either ``value`` (success) or ``error`` is meaningful, never both."""
    value: Optional[T] = None
    error: Optional[Message] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> MessageKind:
        return self.error.kind if self.error else MessageKind.SUCCESS

    def unwrap(self) -> T:
        if self.error is not None:
            raise ValueError(f"{self.error.kind.value}: {self.error.text}")
        return self.value  # type: ignore[return-value]


def ok(value: Any) -> Result:
    return Result(value=value)


def err(kind: MessageKind, text: str) -> Result:
    if kind is MessageKind.SUCCESS:
        raise ValueError('SUCCESS is not an error kind')
    return Result(error=Message(kind, text))


def success_message(text: str) -> Result:
    """A message-only success, as returned by the delete operations."""
    return Result(value=Message(MessageKind.SUCCESS, text))


def not_found(text: str) -> Result:
    return err(MessageKind.NOT_FOUND, text)


def invalid_payload(text: str) -> Result:
    return err(MessageKind.INVALID_PAYLOAD, text)
