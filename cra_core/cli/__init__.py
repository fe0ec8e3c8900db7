"""Click CLI definitions for cra.

The ``cli`` Click group, ``main`` entry point, and core commands live here.
Shared helpers (HelpGroup, load_or_exit, etc.) are in ``cli.helpers``.

Command modules:
- cli.optimize  — optimize and evaluate class models
"""

import click

from cra_core.paths import configure_logger, debug_enabled, log_file, set_debug
from cra_core.cli.helpers import CONTEXT_SETTINGS, HelpGroup


@click.group(invoke_without_command=True, cls=HelpGroup, context_settings=CONTEXT_SETTINGS)
@click.pass_context
def cli(ctx):
    """cra — greedy class responsibility assignment."""
    configure_logger("cra")
    if ctx.invoked_subcommand is None:
        ctx.invoke(help_cmd)


HELP_TEXT = """\
cra — restructure a class model by greedily merging classes.

Commands:
  cra optimize MODEL.yaml [-o OUT]   Optimize and write MODEL.Output.yaml
  cra evaluate MODEL.yaml            Show classes and CRA-index of a model
  cra debug [on|off]                 Toggle debug logging
  cra help                           Show this message

Model files are YAML:

  name: Class Model
  features:
    - name: a1
      kind: attribute
    - name: m1
      kind: method
      data_dependency: [a1]
      functional_dependency: []
  classes:              # optional; replaced by optimize
    - name: C1
      encapsulates: [m1, a1]
"""


@cli.command("help")
def help_cmd():
    """Show help."""
    click.echo(HELP_TEXT)


@cli.command("debug")
@click.argument("state", required=False, type=click.Choice(["on", "off"]))
def debug_cmd(state: str | None):
    """Show or toggle persistent debug logging."""
    if state is not None:
        set_debug(state == "on")
    click.echo(f"Debug logging: {'on' if debug_enabled() else 'off'}")
    click.echo(f"Log file: {log_file()}")


# ---------------------------------------------------------------------------
# Import submodules to register their commands on ``cli``.
# This must be at the bottom of the file, after ``cli`` is defined.
# ---------------------------------------------------------------------------
from cra_core.cli import optimize  # noqa: E402, F401


def main():
    cli()
