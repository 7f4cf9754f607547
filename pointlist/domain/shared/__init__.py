"""Shared domain utilities.

Example usage:
    >>> from pointlist.domain.shared import Ok, Err, is_ok
    >>>
    >>> def read_points(text: str) -> Result[int, str]:
    ...     if not text.isdigit():
    ...         return Err(f"Not a number: {text}")
    ...     return Ok(int(text))
"""

from pointlist.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
