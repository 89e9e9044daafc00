"""
Console printing of outgoing requests.

Rendering goes through Rich; sensitive header values are masked before
anything reaches the terminal or the log.
"""
import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

SENSITIVE_HEADERS = ("authorization", "x-api-key", "proxy-authorization", "cookie")

console = Console(stderr=True)


def mask_sensitive(value: Optional[str], show_chars: int = 10) -> str:
    """Mask a sensitive value, keeping the first `show_chars` characters."""
    if not value:
        return "<none>"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "*" * (len(value) - show_chars)


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of headers with auth-like values masked."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = mask_sensitive(masked[key])
    return masked


def format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    if isinstance(body, bytes):
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
    return str(body)


def print_request(
    method: str,
    url: str,
    headers: Dict[str, str],
    body: Any = None,
    *,
    target: Optional[Console] = None,
) -> None:
    """Print a request panel with masked headers and an optional body."""
    out = target or console
    out.print(
        Panel(f"[bold cyan]{method}[/bold cyan] {url}", title="[bold blue]Request[/bold blue]")
    )
    out.print("[bold]Headers:[/bold]", mask_headers(headers))
    if body is not None:
        lexer = "json" if isinstance(body, (dict, list)) or _looks_like_json(body) else "text"
        out.print(
            Panel(
                Syntax(format_body(body), lexer, theme="monokai"),
                title="[bold]Request Body[/bold]",
            )
        )


def _looks_like_json(body: Any) -> bool:
    return isinstance(body, str) and body[:1] in ("{", "[")
