"""
PassShield Console Interface
=============================

Rich-powered console abstraction giving every PassShield command the same
banner, section headers, severity-coloured messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_SHIELD_THEME = Theme(
    {
        "shield.banner": "bold bright_cyan",
        "shield.section": "bold bright_magenta",
        "shield.success": "bold green",
        "shield.warning": "bold yellow",
        "shield.error": "bold red",
        "shield.info": "bold bright_blue",
        "shield.dim": "dim white",
        "shield.critical": "bold white on red",
        "shield.high": "bold red",
        "shield.medium": "bold yellow",
        "shield.low": "bold bright_cyan",
        "shield.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ___              ___ _    _     _    _
 | _ \__ _ ______ / __| |_ (_)___| |__| |
 |  _/ _` (_-<_-< \__ \ ' \| / -_) / _` |
 |_| \__,_/__/__/ |___/_||_|_\___|_\__,_|
[/bright_cyan]"""

_TAGLINE = "Local Password Strength Analysis"

_SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "shield.critical",
    "HIGH": "shield.high",
    "MEDIUM": "shield.medium",
    "LOW": "shield.low",
    "INFO": "shield.informational",
}


class ShieldConsole:
    """Unified console for PassShield output.

    Usage::

        con = ShieldConsole()
        con.banner()
        con.section("Password Analysis")
        con.success("Report written")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (library / test mode).
        """
        self._console = Console(
            theme=_SHIELD_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """The underlying Rich Console."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PassShield banner with version and timestamp."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[shield.banner]{_TAGLINE}[/shield.banner]\n"
            f"[shield.dim]Version: {version}  |  {now}[/shield.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a section rule."""
        self._console.rule(f"  {title}  ", style="shield.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[shield.success][✔] SUCCESS:[/shield.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[shield.warning][⚠] WARNING:[/shield.warning] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[shield.info][ℹ] INFO:[/shield.info] {message}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled table; every cell is stringified.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich styles.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render findings with severity colouring.

        Expects objects with ``severity``, ``title`` and ``description``
        attributes (see :class:`shared.models.Finding`).
        """
        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = _SEVERITY_STYLES.get(sev_name, "")
            sev_cell = f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name
            tbl.add_row(
                str(idx),
                sev_cell,
                Text(str(getattr(finding, "title", ""))),
                Text(str(getattr(finding, "description", ""))),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._console.print()
