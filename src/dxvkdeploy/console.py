#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console helpers shared by CLI commands."""

from __future__ import annotations

from typing import Any

from provide.foundation.console import perr, pout
from provide.foundation.logger import get_logger

from dxvkdeploy.models import FileOutcome, OperationReport

_OUTCOME_ICONS = {
    FileOutcome.COPIED: "✅",
    FileOutcome.DELETED: "🗑️ ",
    FileOutcome.ALREADY_ABSENT: "➖",
    FileOutcome.SOURCE_MISSING: "❌",
    FileOutcome.COPY_ERROR: "❌",
    FileOutcome.DELETE_ERROR: "❌",
}


def get_command_logger(name: str) -> Any:
    """Return the structured logger for a CLI command."""
    return get_logger(f"dxvkdeploy.commands.{name}")


def show_report(report: OperationReport) -> None:
    """Print one line per file; failures go to stderr."""
    for result in report.results:
        line = f"  {_OUTCOME_ICONS[result.outcome]} {result.name}: {result.outcome.value}"
        if result.reason:
            line += f" ({result.reason})"
        if result.ok:
            pout(line)
        else:
            perr(line)


# 🌶️📦🔚
