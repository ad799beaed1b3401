"""Core data types that flow through the parser.

This module defines the immutable values produced while turning raw show
strings into structured records: the `Success`/`Failure` outcome pair, the
`ShowRecord` itself, and the small set of combinators used to compose
outcomes without raising.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import typing

# --- Validation helpers ---


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            enhanced_message = f"{field_name}: {message}"
            raise exc(enhanced_message)
        raise exc(message)


# --- Outcome Type for Explicit Failure Handling ---
# Parse failures are ordinary return values. Nothing in the parsing path
# raises for malformed input; callers branch on Success/Failure instead.

T = typing.TypeVar("T")
U = typing.TypeVar("U")
R = typing.TypeVar("R")

FailureMode = typing.Literal["silent", "diagnostic"]


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A resolved value."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure]:
    """An unresolved value.

    In silent mode `error` is None; in diagnostic mode it holds an
    `ExtractionError` describing which field of which raw string failed.
    """

    error: TFailure = None  # type: ignore[assignment]


type Outcome[TValue] = Success[TValue] | Failure[typing.Any]

# Shared marker for silent-mode failures; Failure is immutable so one instance suffices.
ABSENT: Failure[None] = Failure(None)


def is_success(outcome: Outcome[typing.Any]) -> bool:
    """Return True when the outcome resolved to a value."""
    return isinstance(outcome, Success)


def map_outcome(outcome: Outcome[T], fn: Callable[[T], U]) -> Outcome[U]:
    """Apply `fn` to a success value; failures pass through untouched."""
    if isinstance(outcome, Success):
        return Success(fn(outcome.value))
    return outcome


def and_then(outcome: Outcome[T], fn: Callable[[T], Outcome[U]]) -> Outcome[U]:
    """Chain a computation that may itself fail.

    `fn` is only called for a success; the first failure short-circuits the
    rest of the chain.
    """
    if isinstance(outcome, Success):
        return fn(outcome.value)
    return outcome


def or_else(primary: Outcome[T], secondary: Callable[[], Outcome[T]]) -> Outcome[T]:
    """Return `primary` if it succeeded, otherwise evaluate `secondary`.

    The secondary computation is a thunk so it only runs when needed. When
    both fail, the secondary failure is returned as-is.

    Args:
        primary: An already evaluated outcome.
        secondary: Zero-argument callable producing the fallback outcome.

    Returns:
        `primary` unchanged on success, else whatever `secondary()` returns.
    """
    if isinstance(primary, Success):
        return primary
    return secondary()


def first_success(*attempts: Callable[[], Outcome[T]]) -> Outcome[T]:
    """Try each attempt in order and keep the first success.

    Equivalent to folding `or_else` left to right; the last failure is
    returned when nothing resolves.
    """
    _require(
        condition=len(attempts) > 0,
        message="at least one attempt is required",
        field_name="attempts",
    )
    head, *rest = attempts
    outcome = head()
    for attempt in rest:
        outcome = or_else(outcome, attempt)
    return outcome


def fold(
    outcome: Outcome[T],
    on_failure: Callable[[typing.Any], R],
    on_success: Callable[[T], R],
) -> R:
    """Collapse an outcome into a single value of either branch."""
    if isinstance(outcome, Success):
        return on_success(outcome.value)
    return on_failure(outcome.error)


def silence(outcome: Outcome[T]) -> Outcome[T]:
    """Drop any diagnostic carried by a failure."""
    if isinstance(outcome, Failure) and outcome.error is not None:
        return ABSENT
    return outcome


# --- Core Data Models ---


@dataclasses.dataclass(frozen=True, slots=True)
class ShowRecord:
    """A show with the years it was on air.

    `end >= start` is intentionally not enforced; single-year shows have
    `start == end`.
    """

    title: str
    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate field types; these are programming errors, not parse failures."""
        _require(
            condition=isinstance(self.title, str),
            message="must be str",
            field_name="title",
            exc=TypeError,
        )
        _require(
            condition=self.title.strip() != "",
            message="cannot be empty",
            field_name="title",
        )
        for name in ("start", "end"):
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful year
            _require(
                condition=isinstance(value, int) and not isinstance(value, bool),
                message="must be int",
                field_name=name,
                exc=TypeError,
            )

    @property
    def duration(self) -> int:
        """Years between start and end (derived, never stored)."""
        return self.end - self.start
