"""Kernel layer - the four container types and their error taxonomy."""

from fallible.kernel.async_option import AsyncOption
from fallible.kernel.async_result import AsyncResult
from fallible.kernel.errors import (
    EmptyAccess,
    FallibleError,
    UnwrapErrOnSuccess,
    UnwrapError,
    UnwrapOnFailure,
)
from fallible.kernel.option import Option, absent, present
from fallible.kernel.result import Result, failure, success

__all__ = [
    "Option",
    "Result",
    "AsyncOption",
    "AsyncResult",
    # Constructors
    "present",
    "absent",
    "success",
    "failure",
    # Errors
    "FallibleError",
    "UnwrapError",
    "EmptyAccess",
    "UnwrapOnFailure",
    "UnwrapErrOnSuccess",
]
