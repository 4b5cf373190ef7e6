"""
module termprompt.prompt.asyncutils

Contains helpers for calling hooks that may be plain functions or coroutines
"""

import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    # widget hooks and user callbacks may be plain functions or coroutines
    if inspect.isawaitable(value):
        return await value

    return value
