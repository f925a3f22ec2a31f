"""
Console helpers — colored messages and the overwrite prompt.

Thin layer over click so the core never prints or reads stdin itself.
"""

from __future__ import annotations

from typing import BinaryIO

import click

from scoggle.core.persistence.project_file import Confirm, render_stdout_fallback


def print_error(message: str) -> None:
    click.echo(click.style("Error: ", fg="red") + message)


def print_success(message: str) -> None:
    click.secho(message, fg="green")


def print_document(content: str) -> None:
    """Last-resort delivery: the whole document between ``` fences."""
    click.echo("Writing content to stdout:")
    click.echo(render_stdout_fallback(content))


def read_confirmation(question: str, stream: BinaryIO | None = None, err: bool = False) -> bool:
    """Ask a yes/no question and read exactly one raw byte.

    ``y`` or ``Y`` means yes. Anything else, no input at all, or a
    failed read means no.
    """
    click.echo(question, err=err)
    if stream is None:
        stream = click.get_binary_stream("stdin")
    try:
        answer = stream.read(1)
    except (OSError, ValueError):
        return False
    if isinstance(answer, str):
        answer = answer.encode("utf-8", errors="replace")
    return answer in (b"y", b"Y")


def confirm_for_policy(policy: str, err: bool = False) -> Confirm:
    """Build the confirm callback for an overwrite policy.

    ``ask`` prompts on stdin; ``always`` and ``never`` answer without
    blocking, for scripted runs.
    """
    if policy == "always":
        return lambda question: True
    if policy == "never":
        return lambda question: False
    return lambda question: read_confirmation(question, err=err)
