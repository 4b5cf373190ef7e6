"""
module termprompt.prompt.dataclasses.promptsettings

Contains the definition of the PromptSettings dataclass, the immutable set of
settings a prompt session runs with. Settings are built once per prompt call
by merging the per-call options with the user's configuration
"""

from dataclasses import dataclass, field
import sys
from types import MappingProxyType
from typing import Any, Callable, Dict, IO, Mapping, Sequence, Tuple, Type

from prompt_toolkit.formatted_text import AnyFormattedText, FormattedText
from prompt_toolkit.styles import BaseStyle, Style

from ...config import PromptConfig
from ..abstract.inputsource import InputSource
from ..abstract.terminaldriver import TerminalDriver
from ..backends.prompt_toolkit.ttyinputsource import TtyInputSource
from ..backends.prompt_toolkit.vt100terminaldriver import Vt100TerminalDriver


@dataclass(frozen=True)
class PromptSettings:
    """
    class PromptSettings

    The immutable settings of a single prompt call. Use from_options() to
    build an instance from per-call options and the user's configuration
    """

    message: str
    reader: InputSource
    terminal: TerminalDriver
    style: BaseStyle
    pointer: AnyFormattedText
    prefix: AnyFormattedText
    indent: str = ""
    keys: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    cbreak: bool = False
    default: Any = None
    hide_default: bool = False
    hint: str | None = None
    validate: Callable[[Any], Any] | None = None
    transform: Callable[[Any], Any] | None = None
    max_end_of_stream_reads: int = 0

    @classmethod
    def from_options(
        cls: Type["PromptSettings"],
        message: str,
        *,
        default: Any = None,
        hide_default: bool = False,
        validate: Callable[[Any], Any] | None = None,
        transform: Callable[[Any], Any] | None = None,
        hint: str | None = None,
        pointer: AnyFormattedText = None,
        indent: str | None = None,
        prefix: AnyFormattedText = None,
        keys: Mapping[str, Sequence[str]] | None = None,
        cbreak: bool | None = None,
        reader: InputSource | IO | int | None = None,
        writer: TerminalDriver | IO | None = None,
        config: PromptConfig | None = None,
    ) -> "PromptSettings":
        """
        Builds the settings for a single prompt call. Options that are not
        provided fall back to the provided configuration

        Args:
            message (str): The message to prompt the user with
            default (Any): The value that is accepted without validation when
                the user submits an empty answer. None means no default
            hide_default (bool): Whether or not the default is shown next to
                the message
            validate (Callable[[Any], Any] | None): Replaces the validation of
                the widget. May return an awaitable
            transform (Callable[[Any], Any] | None): Replaces the transform of
                the widget. May return an awaitable
            hint (str | None): Text shown below the prompt while there is no error
            pointer (AnyFormattedText): Glyph between the message and the answer
                on the success line
            indent (str | None): String every rendered line is prefixed with
            prefix (AnyFormattedText): Glyph shown in front of the message
            keys (Mapping[str, Sequence[str]] | None): Key bindings by action.
                A provided action replaces the default keys of that action
            cbreak (bool | None): Whether or not Ctrl+C is left to the operating
                system while reading
            reader (InputSource | IO | int | None): The input source or a file
                object/descriptor to read key presses from. Defaults to stdin
            writer (TerminalDriver | IO | None): The terminal driver or a text
                stream to write to. Defaults to stdout
            config (PromptConfig | None): The configuration to take defaults
                from. Defaults to the built-in configuration

        Returns:
            PromptSettings: The merged settings

        Raises:
            Nothing
        """

        if config is None:
            config = PromptConfig.make_default()

        # overrides replace the default keys of an action rather than extending them
        merged_keys: Dict[str, Tuple[str, ...]] = {
            action: tuple(key_names) for action, key_names in config.keys.items()
        }
        if keys is not None:
            merged_keys.update(
                {action: tuple(key_names) for action, key_names in keys.items()}
            )

        return cls(
            message=message,
            reader=cls._make_reader(reader),
            terminal=cls._make_terminal(writer),
            style=Style.from_dict(config.style),
            pointer=(
                pointer
                if pointer is not None
                else FormattedText([("class:pointer", config.pointer)])
            ),
            prefix=(
                prefix
                if prefix is not None
                else FormattedText([("class:prefix", config.prefix)])
            ),
            indent=indent if indent is not None else config.indent,
            keys=MappingProxyType(merged_keys),
            cbreak=cbreak if cbreak is not None else config.cbreak,
            default=default,
            hide_default=hide_default,
            hint=hint,
            validate=validate,
            transform=transform,
            max_end_of_stream_reads=config.max_end_of_stream_reads,
        )

    @staticmethod
    def _make_reader(reader: InputSource | IO | int | None) -> InputSource:
        if isinstance(reader, InputSource):
            return reader

        return TtyInputSource(reader if reader is not None else sys.stdin)

    @staticmethod
    def _make_terminal(writer: TerminalDriver | IO | None) -> TerminalDriver:
        if isinstance(writer, TerminalDriver):
            return writer

        return Vt100TerminalDriver(writer)
