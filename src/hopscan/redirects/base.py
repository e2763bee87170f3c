# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Redirect policy base class and decision type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..http.models import HttpRequest


class Decision(str, Enum):
    CONTINUE = "continue"
    STOP = "stop"


class RedirectPolicy(ABC):
    """
    Decides whether the next hop of a redirect chain is issued.

    `decide` is called after every redirect response, before the hop to `request`
    is sent. `chain` holds the requests already issued for this probe, the original
    request first, so it is never empty. Policies hold no per-probe state and are
    shared read-only between workers.
    """

    name: str = "base"
    description: str = ""

    @abstractmethod
    def decide(self, request: HttpRequest, chain: Sequence[HttpRequest]) -> Decision: ...

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(name={self.name!r})"
