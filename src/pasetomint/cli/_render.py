from __future__ import annotations

import json
import shutil
import sys
import textwrap
from typing import TextIO

from colorama import Fore, Style, just_fix_windows_console

from pasetomint.codec import TOKEN_HEADER
from pasetomint.schema import Outcome

just_fix_windows_console()

_TOKEN_INDENT = 16


def _wrap(text: str, indent: int = _TOKEN_INDENT) -> str:
    width = max(shutil.get_terminal_size().columns - 1, indent + 1)
    return textwrap.fill(
        text,
        width=width,
        initial_indent=" " * indent,
        subsequent_indent=" " * indent,
        break_long_words=True,
        break_on_hyphens=False,
    )


def _print_token(token: str, stdout: TextIO) -> None:
    version, purpose, payload = token.split(".", 2)
    prefix = f"{' ' * 7}{version}.{purpose}."
    wrapped = _wrap(payload, indent=len(prefix))
    print(f"{Fore.GREEN}{' ' * 7}\U0001F512 ENCRYPTED{Style.RESET_ALL}", file=stdout)
    print(f"{Fore.BLUE}{prefix}{Fore.WHITE}{wrapped[len(prefix):]}{Style.RESET_ALL}", file=stdout)


def _print_claims(claims: dict, stdout: TextIO) -> None:
    width = max((len(key) for key in claims), default=0)
    print(f"{Fore.MAGENTA}{' ' * (width + 2)}CLAIM VALUES{Style.RESET_ALL}", file=stdout)
    for key, value in claims.items():
        shown = value if isinstance(value, str) else json.dumps(value)
        print(f"{Fore.MAGENTA}{key:>{width}}:{Style.RESET_ALL} {shown}", file=stdout)


def _render_pretty(outcome: Outcome, stdout: TextIO, stderr: TextIO) -> None:
    if not outcome.success:
        print(f"{Fore.RED}✗ {Style.RESET_ALL}{outcome.error}", file=stderr)
        return

    output = outcome.output or ""
    if output.startswith(TOKEN_HEADER):
        _print_token(output, stdout)
        return

    try:
        parsed = json.loads(output)
    except ValueError:
        parsed = None
    if isinstance(parsed, dict):
        _print_claims(parsed, stdout)
    else:
        print(_wrap(output, indent=0), file=stdout)


def render(
    outcome: Outcome,
    output_format: str,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Write ``outcome`` in the requested format and return the exit status."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if output_format == "json":
        if outcome.success:
            document = {"success": True, "output": outcome.output}
        else:
            document = {"success": False, "error": outcome.error}
        print(json.dumps(document), file=stdout)
    elif output_format == "pretty":
        _render_pretty(outcome, stdout, stderr)
    elif outcome.success:
        print(outcome.output, file=stdout)
    else:
        print(f"Error: {outcome.error}", file=stderr)

    return 0 if outcome.success else 1
