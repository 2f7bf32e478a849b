from .combinators import (
    collect_options,
    collect_results,
    first_present,
    flatten_option,
    flatten_result,
    partition,
    sequence,
    sequence_async,
    traverse,
)
from .kernel import (
    AsyncOption,
    AsyncResult,
    EmptyAccess,
    FallibleError,
    Option,
    Result,
    UnwrapErrOnSuccess,
    UnwrapError,
    UnwrapOnFailure,
    absent,
    failure,
    present,
    success,
)

__all__ = [
    # Containers
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
    # Combinators
    "sequence",
    "traverse",
    "collect_results",
    "partition",
    "collect_options",
    "first_present",
    "flatten_option",
    "flatten_result",
    "sequence_async",
]
