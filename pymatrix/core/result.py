"""
Per-call result container for PyMatrix operations.

The plain operations raise on failure. Result is the non-raising form
used by pymatrix.dense.checked: every call returns its own envelope
holding either the value or the error, so a caller can branch on the
outcome without a try block and without any state shared across calls.

Design decisions:
    - Generic over payload P (Matrix for most operations, float for
      determinant and trace)
    - Exactly one of value / error is meaningful; ok tells which
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar, Generic

from pymatrix.core.exceptions import MatrixError

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable outcome of a single matrix operation.

    Type Parameters:
        P: The payload type produced on success

    Attributes:
        operation: Name of the operation that produced this result
        value: The payload, or None if the operation failed
        error: The MatrixError raised by the operation, or None on success
        timing: Execution timing breakdown, or None if not measured
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> r = checked.inverse([[1.0, 2.0], [2.0, 4.0]])
        >>> r.ok
        False
        >>> isinstance(r.error, SingularMatrixError)
        True

        >>> checked.determinant([[1.0, 2.0], [3.0, 4.0]]).unwrap()
        -2.0
    """
    operation: str
    value: P | None = None
    error: MatrixError | None = None
    timing: dict[str, float] | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.value is not None and self.error is not None:
            raise ValueError(
                f"Result for {self.operation!r} cannot carry both a value and an error"
            )

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    def unwrap(self) -> P:
        """
        Return the payload, re-raising the stored error on failure.

        Raises:
            MatrixError: The error captured when the operation failed
        """
        if self.error is not None:
            raise self.error
        return self.value

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
