# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Synthetic command surface: execution-time model and canned command output."""

import random
import re
from datetime import datetime

__all__ = [
    "simulated_execution_time",
    "simulated_output",
]

BASE_TIME_MS = 50.0
PER_CHAR_MS = 5.0
PER_PIPE_MS = 200.0
SEARCH_PENALTY_MS = 500.0
MAX_JITTER_MS = 100.0

_ECHO_PATTERN = re.compile(r'echo\s+"?([^"]*)"?')

_LS_OUTPUT = "file1.txt\nfile2.js\ndirectory1\ndirectory2\npackage.json\nREADME.md"
_CAT_OUTPUT = (
    '{\n  "name": "terminal-app",\n  "version": "1.0.0",\n'
    '  "description": "Terminal Application"\n}'
)
_UPTIME_OUTPUT = "10:30  up 2 days, 12:43, 5 users, load averages: 1.20 1.33 1.45"
_PS_OUTPUT = (
    "USER    PID  %CPU %MEM    VSZ   RSS TTY      STAT START   TIME COMMAND\n"
    "user  12345  2.0  0.2 123456 12345 ?        Ss   10:00   0:01 node\n"
    "user  12346  1.5  0.1  98765  9876 ?        S    10:01   0:00 npm"
)
_DEFAULT_OUTPUT = "Command executed successfully."


def simulated_execution_time(
    command: str, rng: random.Random, jitter: bool = True
) -> float:
    """Synthetic execution time for ``command`` in milliseconds.

    ``50 + 5 * len(command)``, plus 200 per pipe, plus 500 when the command
    searches (``find`` / ``grep``), plus up to 100 of uniform jitter.
    """
    duration = BASE_TIME_MS + PER_CHAR_MS * len(command)
    duration += PER_PIPE_MS * command.count("|")
    if "find" in command or "grep" in command:
        duration += SEARCH_PENALTY_MS
    if jitter:
        duration += rng.random() * MAX_JITTER_MS
    return duration


def simulated_output(command: str) -> str:
    """Canned output for the handful of commands the benchmark knows about."""
    if command.startswith("ls"):
        return _LS_OUTPUT
    if command.startswith("echo"):
        match = _ECHO_PATTERN.match(command)
        return match.group(1) if match else ""
    if "cat" in command:
        return _CAT_OUTPUT
    if command.startswith("date"):
        return datetime.now().astimezone().strftime("%a %b %d %H:%M:%S %Z %Y")
    if command.startswith("uptime"):
        return _UPTIME_OUTPUT
    if "find" in command and "wc -l" in command:
        return "42"
    if command.startswith("ps"):
        return _PS_OUTPUT
    return _DEFAULT_OUTPUT
