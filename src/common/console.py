"""ANSI colour codes, fatal-error helper and report framing."""

from __future__ import annotations

import sys
from typing import NoReturn


class C:
    """ANSI colour codes (no-op if not a tty)."""

    _tty = sys.stdout.isatty()
    YELLOW = "\033[1;33m" if _tty else ""
    BOLD = "\033[1m" if _tty else ""
    NC = "\033[0m" if _tty else ""


def fail(msg: str) -> NoReturn:
    print(msg, file=sys.stderr)
    sys.exit(1)


# ── Report formatting ────────────────────────────────────────────────────────

DIV = "─" * 44
SEC = "═" * 44


def header(title: str) -> str:
    return f"{SEC}\n  {C.BOLD}{title}{C.NC}\n{SEC}"


def section(title: str) -> str:
    return f"\n{DIV}\n  {title}\n{DIV}"
