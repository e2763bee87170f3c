# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Concurrent probing pipeline."""

from .conduit import ClosableQueue, QueueClosed
from .engine import InspectionEngine
from .prober import probe
from .sources import FileHostSource, HostSource, StaticHostSource, StreamHostSource, host_source
from .workers import DiagnosticWriter, HostnameProducer, ProbeWorker, ResultWriter, WorkerState

__all__ = [
    "ClosableQueue",
    "DiagnosticWriter",
    "FileHostSource",
    "HostSource",
    "HostnameProducer",
    "InspectionEngine",
    "ProbeWorker",
    "QueueClosed",
    "ResultWriter",
    "StaticHostSource",
    "StreamHostSource",
    "WorkerState",
    "host_source",
    "probe",
]
