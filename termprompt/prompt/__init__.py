"""
module termprompt.prompt

Contains the prompt engine: the prompt session that drives the
render/read/validate loop, its validation pipeline and the injection
channel used to run prompts headless
"""

import asyncio
from typing import Any

from .abstract import PromptWidget
from .dataclasses import PromptSettings
from .injectionchannel import InjectionChannel
from .promptsession import PromptSession
from .validationpipeline import ValidationPipeline


def run_prompt(
    widget: PromptWidget,
    message: str,
    injection: InjectionChannel | None = None,
    **options: Any,
) -> Any:
    """
    Prompts the user with the provided widget on the current terminal and
    blocks until an answer is resolved

    Args:
        widget (PromptWidget): The widget that supplies the value handling
        message (str): The message to prompt the user with
        injection (InjectionChannel | None): A channel holding a pre-supplied
            answer. The terminal is not read from if it holds a value
        **options (Any): Per-call options accepted by PromptSettings.from_options()

    Returns:
        Any: The resolved answer

    Raises:
        PromptException: If the prompt could not be answered
    """

    return asyncio.run(
        PromptSession(
            widget, PromptSettings.from_options(message, **options), injection=injection
        ).prompt()
    )
