"""Shared helpers for the cra CLI."""

import time
from contextlib import contextmanager
from pathlib import Path

import click

from cra_core import store
from cra_core.model import ClassModel, MalformedGraph

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


class HelpGroup(click.Group):
    """Click Group that treats 'help' as an alias for --help everywhere.

    Handles two cases:
    - ``cra help`` — 'help' as the command name when no help command exists
    - ``cra optimize help`` — 'help' as an arg to a leaf command
    """

    group_class = type  # auto-propagate HelpGroup to child groups

    def resolve_command(self, ctx, args):
        if args and args[0] == "help":
            # If there's a real 'help' command registered, let it run
            if super().get_command(ctx, "help") is not None:
                return super().resolve_command(ctx, args)
            args = ["--help"] + args[1:]
        cmd_name, cmd, remaining = super().resolve_command(ctx, args)
        if (remaining and remaining[0] == "help"
                and cmd is not None and not isinstance(cmd, click.Group)):
            remaining = ["--help"] + remaining[1:]
        return cmd_name, cmd, remaining


def load_or_exit(path: Path) -> ClassModel:
    """Load a model, turning load errors into a CLI error and exit code 1."""
    try:
        return store.load(path)
    except FileNotFoundError:
        click.echo(f"Model file not found: {path}", err=True)
        raise SystemExit(1)
    except MalformedGraph as e:
        click.echo(f"Malformed class model {path}: {e}", err=True)
        raise SystemExit(1)


@contextmanager
def timed(label: str):
    """Echo how long the wrapped block took, in milliseconds."""
    start = time.monotonic()
    yield
    elapsed_ms = int((time.monotonic() - start) * 1000)
    click.echo(f"{label} took {elapsed_ms}ms")
