# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Line-oriented hostname sources."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import AbstractContextManager, nullcontext
from typing import IO, Protocol


class HostSource(Protocol):
    """Something the producer can open and read hostname lines from."""

    label: str

    def open(self) -> AbstractContextManager[Iterable[str]]: ...


class FileHostSource:
    def __init__(self, path: str):
        self.path = path
        self.label = path

    def open(self) -> AbstractContextManager[Iterable[str]]:
        return open(self.path, encoding="utf-8")


class StreamHostSource:
    """Reads from an already open text stream (stdin); the stream is left open."""

    def __init__(self, stream: IO[str], label: str = "<stdin>"):
        self.stream = stream
        self.label = label

    def open(self) -> AbstractContextManager[Iterable[str]]:
        return nullcontext(self.stream)


class StaticHostSource:
    def __init__(self, lines: Iterable[str], label: str = "<static>"):
        self.lines = list(lines)
        self.label = label

    def open(self) -> AbstractContextManager[Iterable[str]]:
        return nullcontext(self.lines)


def host_source(path: str | None, stdin: IO[str]) -> HostSource:
    """Select the file at `path`, or `stdin` when no path (or `-`) is given."""
    if not path or path == "-":
        return StreamHostSource(stdin)
    return FileHostSource(path)


__all__ = ["FileHostSource", "HostSource", "StaticHostSource", "StreamHostSource", "host_source"]
