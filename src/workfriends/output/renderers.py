"""Rich renderers for ``check`` and ``validate`` results.

Everything is printed to a StringIO-backed Console and returned as a
string, so the command layer decides where it goes. Rich drops ANSI codes
by itself when the process is not attached to a terminal.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from workfriends.services.result import ServiceResult

_THEME = Theme(
    {
        "wf.ok": "bold green",
        "wf.error": "bold red",
        "wf.warning": "bold yellow",
        "wf.op": "bold cyan",
        "wf.key": "dim",
        "wf.email": "bold",
        "wf.domain": "blue",
        "wf.valid": "green",
        "wf.invalid": "red",
    }
)


def _buffer_console(buffer: StringIO) -> Console:
    return Console(file=buffer, theme=_THEME, highlight=False, width=120)


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult as human-readable text."""
    buffer = StringIO()
    console = _buffer_console(buffer)

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return buffer.getvalue().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "check":
        return "yes" if result.data.get("work_friends") else "no"

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "wf.ok"), (f"  {result.op}", "wf.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="wf.key")
    if isinstance(value, list):
        v = Text(", ".join(str(item) for item in value) or "-")
        if key.endswith("domains"):
            v.stylize("wf.domain")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────

# Detail keys naming the rejected inputs; always shown, one per line.
_REJECTED_KEYS = ("invalid_emails", "invalid_domains")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "wf.error"), (f"  {result.op}", "wf.op"), f" — {msg}"))

    if not err:
        return

    for key in _REJECTED_KEYS:
        for value in err.detail.get(key, []):
            console.print(
                Text(f"  {key[:-1]}: ", style="wf.key"),
                Text(repr(value), style="wf.invalid"),
                sep="",
            )

    if verbose:
        extra = {k: v for k, v in err.detail.items() if k not in _REJECTED_KEYS}
        if extra:
            console.print(Text("  detail:", style="dim"))
            for k, v in extra.items():
                console.print(f"    {k}: {v}")
        _render_meta(console, result)


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a membership check verdict with the domains involved."""
    data = result.data
    _status_line(console, result)

    if data.get("work_friends"):
        console.print(
            "  [wf.ok]Work friends[/wf.ok]: all addresses belong to one organization."
        )
    else:
        console.print(
            "  [wf.warning]Not work friends[/wf.warning]: addresses span organizations."
        )

    _field(console, "mode", data.get("mode", ""))
    _field(console, "emails", data.get("count", 0))
    _field(console, "email_domains", data.get("email_domains", []))
    if data.get("mode") == "known":
        _field(console, "known_domains", data.get("known_domains", []))
        for outsider in data.get("outsiders", []):
            console.print(
                Text("  outsider: ", style="wf.key"),
                Text(outsider, style="wf.email"),
                sep="",
            )
    if verbose:
        _render_meta(console, result)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render per-address validity as a table."""
    items = result.data.get("items", [])
    _status_line(console, result)
    if not items:
        _field(console, "valid_count", 0)
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Email", style="wf.email")
    table.add_column("Valid")
    table.add_column("Domain", style="wf.domain")
    for item in items:
        valid = bool(item.get("valid"))
        table.add_row(
            str(item.get("email", "")),
            Text("yes" if valid else "no", style="wf.valid" if valid else "wf.invalid"),
            str(item.get("domain") or ""),
        )
    console.print(table)
    _field(console, "valid_count", result.data.get("valid_count", 0))
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS = {
    "check": _render_check,
    "validate": _render_validate,
}
