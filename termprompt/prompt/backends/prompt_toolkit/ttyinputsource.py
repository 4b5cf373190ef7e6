"""
module termprompt.prompt.backends.prompt_toolkit.ttyinputsource

Contains the definition of the TtyInputSource class, an input source that
reads raw bytes from a file descriptor (usually stdin) without blocking the
event loop
"""

import asyncio
import contextlib
import logging
import os
from typing import IO, Iterator

from prompt_toolkit.input.vt100 import raw_mode

from ...abstract import InputSource
from .cbreakmode import cbreak_mode

logger = logging.getLogger(__name__)


class TtyInputSource(InputSource):
    """
    class TtyInputSource

    An input source that reads raw bytes from a file descriptor. Terminals
    are switched into raw (or cbreak) mode using prompt_toolkit
    """

    __stdin: IO | int

    def __init__(self: "TtyInputSource", stdin: IO | int) -> None:
        self.__stdin = stdin

    def fileno(self: "TtyInputSource") -> int:
        # resolved lazily so that headless sessions never touch stdin
        return self.__stdin if isinstance(self.__stdin, int) else self.__stdin.fileno()

    def isatty(self: "TtyInputSource") -> bool:
        return os.isatty(self.fileno())

    @contextlib.contextmanager
    def raw_mode(self: "TtyInputSource", cbreak: bool = False) -> Iterator[None]:
        fileno: int = self.fileno()
        with (cbreak_mode if cbreak else raw_mode)(fileno):
            logger.debug("fd %d entered %s mode", fileno, "cbreak" if cbreak else "raw")
            yield

    async def read(self: "TtyInputSource", size: int) -> bytes:
        fileno: int = self.fileno()
        loop = asyncio.get_running_loop()
        future: asyncio.Future[bytes] = loop.create_future()

        def _read_ready() -> None:
            if future.done():
                return

            try:
                future.set_result(os.read(fileno, size))
            except OSError as exc:
                future.set_exception(exc)

        try:
            loop.add_reader(fileno, _read_ready)
        except PermissionError:
            # regular files can't be polled but are always ready to be read
            return os.read(fileno, size)

        try:
            return await future
        finally:
            loop.remove_reader(fileno)
