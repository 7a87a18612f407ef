"""Async support: AsyncResult, concurrent combination, timeouts and retry.

Example:
    ```python
    from railway.async_ import AsyncResult, all_, retry

    async def main():
        users = await all_([fetch_user(1), fetch_user(2)], limit=2)
        report = await retry(lambda: build_report(users), max_attempts=3, delay=1.0)
    ```
"""

from railway.async_.combinators import (
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
    sequence_object,
    to_async,
    try_async,
    with_timeout,
)
from railway.async_.result import AsyncResult
from railway.async_.retry import RetryPolicy, retry

__all__ = [
    "AsyncResult",
    "RetryPolicy",
    "all_",
    "any_",
    "async_flat_map",
    "async_map",
    "collect_async_results",
    "flatten_async_result",
    "from_awaitable",
    "is_async_result",
    "map_async_iter",
    "pipeline",
    "retry",
    "sequence_object",
    "to_async",
    "try_async",
    "with_timeout",
]
