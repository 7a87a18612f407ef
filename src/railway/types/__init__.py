"""Core types: Result, Option, Either, Validation."""

from railway.types.either import (
    Either,
    Left,
    Right,
    either_from_result,
    is_left,
    is_right,
    left,
    right,
    try_catch,
)
from railway.types.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    is_none,
    is_some,
    none,
    some,
)
from railway.types.result import Err, Ok, Result, collect, err, is_err, is_ok, is_result, ok
from railway.types.validation import (
    Invalid,
    Valid,
    Validation,
    combine_validations,
    from_option,
    from_result,
    invalid,
    is_invalid,
    is_valid,
    valid,
    validate_all,
)

__all__ = [
    "Either",
    "Err",
    "Invalid",
    "Left",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Right",
    "Some",
    "Valid",
    "Validation",
    "collect",
    "combine_validations",
    "either_from_result",
    "err",
    "from_nullable",
    "from_option",
    "from_result",
    "invalid",
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
    "none",
    "ok",
    "right",
    "some",
    "try_catch",
    "valid",
    "validate_all",
]
