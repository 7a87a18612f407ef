"""railway: Result, Option, Either and Validation types for Python 3.13+.

Flat imports (preferred):
    from railway import Result, Ok, Err, Option, Some, Nothing
    from railway import all_, pipeline, retry, safe

Submodule imports (for organization):
    from railway.types import Validation, combine_validations
    from railway.async_ import AsyncResult, with_timeout
    from railway.parse import parse_number
"""

# Types
from railway.types import (
    Either,
    Err,
    Invalid,
    Left,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Right,
    Some,
    Valid,
    Validation,
    collect,
    combine_validations,
    either_from_result,
    err,
    from_nullable,
    from_option,
    from_result,
    invalid,
    is_err,
    is_invalid,
    is_left,
    is_none,
    is_ok,
    is_result,
    is_right,
    is_some,
    is_valid,
    left,
    none,
    ok,
    right,
    some,
    try_catch,
    valid,
    validate_all,
)

# Errors
from railway.errors import (
    OperationTimeoutError,
    RailwayError,
    RetryExhausted,
    RetryExhaustedError,
    Timeout,
    UnwrapError,
)

# Combinators
from railway.combinators import (
    chain,
    collect_options,
    combine,
    compose,
    map_,
    map_error,
    recover,
    tap,
    try_fn,
    validate,
    validate_chain,
)

# Async
from railway.async_ import (
    AsyncResult,
    RetryPolicy,
    all_,
    any_,
    async_flat_map,
    async_map,
    collect_async_results,
    flatten_async_result,
    from_awaitable,
    is_async_result,
    map_async_iter,
    pipeline,
    retry,
    sequence_object,
    to_async,
    try_async,
    with_timeout,
)

# Decorators
from railway.decorators import safe, safe_async

# Helpers
from railway.lazy import Lazy
from railway.parse import parse_date, parse_json, parse_number

# Configuration
from railway._config import Settings, init
from railway._logging import configure_logging, get_logger

__all__ = [
    "AsyncResult",
    "Either",
    "Err",
    "Invalid",
    "Lazy",
    "Left",
    "Nothing",
    "NothingType",
    "Ok",
    "OperationTimeoutError",
    "Option",
    "RailwayError",
    "Result",
    "RetryExhausted",
    "RetryExhaustedError",
    "RetryPolicy",
    "Right",
    "Settings",
    "Some",
    "Timeout",
    "UnwrapError",
    "Valid",
    "Validation",
    "all_",
    "any_",
    "async_flat_map",
    "async_map",
    "chain",
    "collect",
    "collect_async_results",
    "collect_options",
    "combine",
    "combine_validations",
    "compose",
    "configure_logging",
    "either_from_result",
    "err",
    "flatten_async_result",
    "from_awaitable",
    "from_nullable",
    "from_option",
    "from_result",
    "get_logger",
    "init",
    "invalid",
    "is_async_result",
    "is_err",
    "is_invalid",
    "is_left",
    "is_none",
    "is_ok",
    "is_result",
    "is_right",
    "is_some",
    "is_valid",
    "left",
    "map_",
    "map_async_iter",
    "map_error",
    "none",
    "ok",
    "parse_date",
    "parse_json",
    "parse_number",
    "pipeline",
    "recover",
    "retry",
    "right",
    "safe",
    "safe_async",
    "sequence_object",
    "some",
    "tap",
    "to_async",
    "try_async",
    "try_catch",
    "try_fn",
    "valid",
    "validate",
    "validate_all",
    "validate_chain",
    "with_timeout",
]
