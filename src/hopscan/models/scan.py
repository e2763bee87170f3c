# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pipeline run summary model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import SourceReadError


@dataclass
class InspectionSummary:
    """Counters for one pipeline run.

    Individual probe failures never fail the run; an unreadable source or an unwritable
    output does.
    """

    policy: str
    workers: int
    candidates: int = 0
    results: int = 0
    errors: int = 0
    source_error: SourceReadError | None = None
    output_error: OSError | None = None

    @property
    def completed(self) -> bool:
        return self.source_error is None and self.output_error is None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "policy": self.policy,
            "workers": self.workers,
            "candidates": self.candidates,
            "results": self.results,
            "errors": self.errors,
        }
        if self.source_error is not None:
            data["source_error"] = str(self.source_error)
        if self.output_error is not None:
            data["output_error"] = str(self.output_error)
        return data


__all__ = ["InspectionSummary"]
