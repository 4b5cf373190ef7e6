"""
module termprompt.prompt.validationpipeline

Contains the definition of the ValidationPipeline class which turns a raw
input value into either a resolved value or an error message
"""

import logging
from typing import Any

from .. import constants
from .abstract import PromptWidget
from .asyncutils import resolve
from .dataclasses import PromptSettings, PromptState
from .enums import SessionPhase

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    if value is None:
        return True

    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0

    return False


class ValidationPipeline:
    """
    class ValidationPipeline

    Validates raw input values for a prompt session. Empty values are
    replaced by the configured default without any validation. Otherwise
    the custom validator (or the widget's own one) decides whether the value
    is accepted and the custom transform (or the widget's own one) maps it
    to the resolved value. After every run exactly one of the state's value
    and error is set
    """

    __settings: PromptSettings
    __state: PromptState
    __widget: PromptWidget

    def __init__(
        self: "ValidationPipeline",
        widget: PromptWidget,
        settings: PromptSettings,
        state: PromptState,
    ) -> None:
        self.__widget = widget
        self.__settings = settings
        self.__state = state

    async def run(self: "ValidationPipeline", value: Any) -> None:
        self.__state.phase = SessionPhase.VALIDATING

        # defaults are trusted and never validated or transformed
        if is_empty(value) and self.__settings.default is not None:
            logger.debug("empty input, using default %r", self.__settings.default)
            self.__state.value = self.__settings.default
            self.__state.error = None
            return

        self.__state.value = None
        self.__state.error = None

        validation: Any = await resolve(
            self.__settings.validate(value)
            if self.__settings.validate is not None
            else self.__widget.validate(value)
        )

        match validation:
            case False:
                self.__state.error = constants.INVALID_ANSWER_MESSAGE
            case str():
                self.__state.error = validation
            case _:
                self.__state.value = await self._transform(value)

                if self.__state.value is None:
                    self.__state.error = constants.INVALID_ANSWER_MESSAGE

        logger.debug(
            "validated %r: value=%r error=%r",
            value,
            self.__state.value,
            self.__state.error,
        )

    async def _transform(self: "ValidationPipeline", value: Any) -> Any:
        return await resolve(
            self.__settings.transform(value)
            if self.__settings.transform is not None
            else self.__widget.transform(value)
        )
