"""
authconf CLI - styled output helpers built on Click.

    success(), error(), warning(), dim()   coloured messages
    banner()                               bordered header
    section()                              ruled section title
    kv()                                   aligned key-value pair
    bullet()                               bulleted list item
    table()                                minimal aligned table

click.style handles NO_COLOR / TERM=dumb.
"""

from __future__ import annotations

import shutil
from typing import Optional, Sequence

import click

_TERM_WIDTH: Optional[int] = None


def _tw() -> int:
    """Terminal width, cached and clamped to a sane range."""
    global _TERM_WIDTH
    if _TERM_WIDTH is None:
        _TERM_WIDTH = max(40, min(shutil.get_terminal_size((80, 24)).columns, 120))
    return _TERM_WIDTH


# ═══════════════════════════════════════════════════════════════════════════
# Basic styled output
# ═══════════════════════════════════════════════════════════════════════════


def success(message: str) -> None:
    click.echo(click.style(message, fg="green"))


def error(message: str) -> None:
    """Print error message in red on stderr."""
    click.echo(click.style(message, fg="red"), err=True)


def warning(message: str) -> None:
    click.echo(click.style(message, fg="yellow"))


def dim(message: str) -> None:
    click.echo(click.style(message, dim=True))


# ═══════════════════════════════════════════════════════════════════════════
# Characters
# ═══════════════════════════════════════════════════════════════════════════

_H_TL = "\u250f"   # ┏
_H_TR = "\u2513"   # ┓
_H_BL = "\u2517"   # ┗
_H_BR = "\u251b"   # ┛
_H_H  = "\u2501"   # ━
_H_V  = "\u2503"   # ┃
_L_H  = "\u2500"   # ─

_BULLET = "\u2022"     # •
_CHECK  = "\u2713"     # ✓
_CROSS  = "\u2717"     # ✗
_CIRCLE = "\u25cb"     # ○


# ═══════════════════════════════════════════════════════════════════════════
# Structure
# ═══════════════════════════════════════════════════════════════════════════


def banner(title: str = "authconf", subtitle: str = "", *, width: Optional[int] = None, fg: str = "cyan") -> None:
    """
    Print a bordered banner with centred title.

        ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
        ┃                     authconf                         ┃
        ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛
    """
    w = width or min(_tw(), 60)
    inner = w - 2
    click.echo(click.style(f"{_H_TL}{_H_H * inner}{_H_TR}", fg=fg))
    click.echo(click.style(f"{_H_V}{title.center(inner)}{_H_V}", fg=fg, bold=True))
    if subtitle:
        click.echo(click.style(f"{_H_V}{subtitle.center(inner)}{_H_V}", fg=fg))
    click.echo(click.style(f"{_H_BL}{_H_H * inner}{_H_BR}", fg=fg))


def section(title: str, *, width: Optional[int] = None, fg: str = "cyan") -> None:
    """
    Print a section header with a ruled line.

        ── Clients ─────────────────────────────────
    """
    w = width or _tw()
    dashes = max(4, w - len(title) - 6)
    click.echo(click.style(f"{_L_H}{_L_H} {title} {_L_H * dashes}", fg=fg, bold=True))


def kv(key: str, value: str, *, key_width: int = 20, indent: int = 2, key_fg: str = "white", val_fg: str = "cyan") -> None:
    """
    Print an aligned key-value pair.

        Clients:            3
        Callback URL:       https://app/callback
    """
    k = click.style(f"{key}:", fg=key_fg)
    v = click.style(str(value), fg=val_fg)
    padding = " " * max(1, key_width - len(key) - 1)
    click.echo(f"{' ' * indent}{k}{padding}{v}")


def bullet(text: str, *, indent: int = 2, fg: str = "white") -> None:
    click.echo(f"{' ' * indent}{click.style(_BULLET, fg='cyan')} {click.style(text, fg=fg)}")


def table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    header_fg: str = "cyan",
    row_fg: str = "white",
    indent: int = 2,
) -> None:
    """
    Print a minimal aligned table.

        Name        Family    Detail
        ─────────── ───────── ──────────────────────
        cas.0       cas       https://cas/login
    """
    prefix = " " * indent
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[:len(headers)]):
            widths[i] = max(widths[i], len(str(cell)))
    widths = [w + 2 for w in widths]

    header = "".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    click.echo(f"{prefix}{click.style(header, fg=header_fg, bold=True)}")
    click.echo(f"{prefix}{click.style(''.join(_L_H * w for w in widths), dim=True)}")
    for row in rows:
        line = "".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row[:len(widths)]))
        click.echo(f"{prefix}{click.style(line, fg=row_fg)}")
