from __future__ import annotations

import asyncio
import os

from termprompt.prompt.backends.prompt_toolkit import TtyInputSource


def test_reads_available_bytes_from_a_pipe():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"abcdef")
        source = TtyInputSource(read_fd)

        assert asyncio.run(source.read(4)) == b"abcd"
        assert asyncio.run(source.read(4)) == b"ef"
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_closed_pipe_reads_end_of_stream():
    read_fd, write_fd = os.pipe()
    os.close(write_fd)
    try:
        assert asyncio.run(TtyInputSource(read_fd).read(8)) == b""
    finally:
        os.close(read_fd)


def test_regular_files_are_read_directly(tmp_path):
    path = tmp_path / "answers"
    path.write_bytes(b"yes\r")

    with open(path, "rb") as answers:
        source = TtyInputSource(answers)

        assert source.isatty() is False
        assert asyncio.run(source.read(8)) == b"yes\r"
        assert asyncio.run(source.read(8)) == b""


def test_file_objects_are_resolved_lazily():
    class Unopened:
        def fileno(self) -> int:
            raise AssertionError("fileno() should not be called")

    # constructing the source must not touch the stream
    TtyInputSource(Unopened())
