"""Optimize and evaluate commands for the cra CLI."""

import logging
from pathlib import Path

import click

from cra_core import store
from cra_core.metrics import evaluate
from cra_core.optimizer import optimize
from cra_core.output import merge_line, model_to_json, model_to_text

from cra_core.cli import cli
from cra_core.cli.helpers import load_or_exit, timed

OPTIMIZED_MODEL_NAME = "Optimized Class Model"

_log = logging.getLogger("cra.cli")


@cli.command("optimize")
@click.argument("model_path", metavar="MODEL", type=click.Path(path_type=Path))
@click.option("-o", "--output", "output", default=None, type=click.Path(path_type=Path),
              help="Result file (default: MODEL.Output.yaml next to the input)")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Don't print each merge")
def optimize_cmd(model_path: Path, output: Path | None, quiet: bool):
    """Merge classes greedily until no merge improves the model."""
    with timed("Loading model"):
        model = load_or_exit(model_path)
    had_classes = bool(model.classes)
    before = evaluate(model)

    def echo_merge(event):
        if not quiet:
            click.echo(merge_line(event))

    with timed("Model optimization"):
        result = optimize(model, on_merge=echo_merge)
    _log.info("optimize %s: %d -> %d classes in %d merges",
              model_path, result.initial_classes, result.final_classes,
              result.merge_count)

    out_path = output or store.output_path(model_path)
    with timed("Serializing result model"):
        model.name = OPTIMIZED_MODEL_NAME
        store.save(model, out_path)

    after = evaluate(model)
    click.echo(f"{result.final_classes} classes after {result.merge_count} merges")
    if had_classes:
        click.echo(f"CRA-Index before: {before.cra_index:.4f}")
    click.echo(f"CRA-Index: {after.cra_index:.4f}")
    click.echo(f"Result written to {out_path}")


@cli.command("evaluate")
@click.argument("model_path", metavar="MODEL", type=click.Path(path_type=Path))
@click.option("--format", "output_fmt", default="text", type=click.Choice(["text", "json"]),
              help="Output format")
def evaluate_cmd(model_path: Path, output_fmt: str):
    """Show the classes of a model and its CRA-index."""
    model = load_or_exit(model_path)
    score = evaluate(model)
    if output_fmt == "json":
        click.echo(model_to_json(model, score))
    else:
        click.echo(model_to_text(model, score))
