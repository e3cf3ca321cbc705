"""Result type: tagged success/failure outcome with a closed error taxonomy.

Every fallible core operation returns ``Result[T]`` instead of raising.
Callers branch with ``isinstance(result, Failure)`` (or ``is_failure``) and
propagate the failure unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Closed error taxonomy."""

    INVALID_INPUT = "invalid-input"
    NOT_FOUND = "not-found"
    CONFLICT = "conflict"
    FILE_IO = "file-io"
    AI_FAILED = "ai-failed"


@dataclass(frozen=True)
class LexicaError:
    """Error payload carried by a Failure."""

    kind: ErrorKind
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "reason": self.reason}


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: LexicaError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def reason(self) -> str:
        return self.error.reason


Result = Union[Success[T], Failure]


def succeed(value: T) -> Success[T]:
    """Wrap a successful value."""
    return Success(value)


def fail(kind: ErrorKind, reason: str) -> Failure:
    return Failure(LexicaError(kind, reason))


def fail_invalid_input(reason: str) -> Failure:
    return fail(ErrorKind.INVALID_INPUT, reason)


def fail_not_found(reason: str) -> Failure:
    return fail(ErrorKind.NOT_FOUND, reason)


def fail_conflict(reason: str) -> Failure:
    return fail(ErrorKind.CONFLICT, reason)


def fail_file_io(reason: str) -> Failure:
    return fail(ErrorKind.FILE_IO, reason)


def fail_ai(reason: str) -> Failure:
    return fail(ErrorKind.AI_FAILED, reason)


def is_success(result: Result[Any]) -> bool:
    return isinstance(result, Success)


def is_failure(result: Result[Any]) -> bool:
    return isinstance(result, Failure)


def unwrap(result: Result[T]) -> T:
    """Return the value of a Success.

    Raises:
        ValueError: If ``result`` is a Failure. Only for glue code and tests
            where a failure is a programming error.
    """
    if isinstance(result, Failure):
        _raise_unwrap(result)
    return result.value


def _raise_unwrap(result: Failure) -> NoReturn:
    raise ValueError(f"Expected success but got {result.kind.value}: {result.reason}")
