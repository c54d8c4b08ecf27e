"""CLI entry point — run graph analyses over JSON files."""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from dagscope import codec, diagnostics
from dagscope.config import load_config
from dagscope.model import (
    CycleDetectionResult,
    Graph,
    PathResult,
    TopologicalSortResult,
)
from dagscope.output_console import (
    render_cycles,
    render_graph,
    render_path,
    render_toposort,
)
from dagscope.output_json import render_json, write_run_metadata

if TYPE_CHECKING:
    from pydantic import BaseModel

app = typer.Typer(no_args_is_help=True)

GraphOpt = Annotated[Path, typer.Option("--graph", help="Path to graph JSON file")]
ConfigOpt = Annotated[Path | None, typer.Option("--config", help="Path to dagscope.yml")]
OutOpt = Annotated[Path, typer.Option("--out", help="Output directory for reports")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")]


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """dagscope — cycle detection, dependency ordering and path finding."""
    diagnostics.init()


def _setup(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def _read_input(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: cannot read {path}: {e}", err=True)
        raise SystemExit(2)  # noqa: B904


def _write_reports(result: BaseModel, out: Path, command: str, source: Path) -> None:
    run_meta: dict[str, str] = {
        "timestamp_utc": (
            datetime.datetime.now(datetime.UTC).isoformat().replace("+00:00", "Z")
        ),
        "command": command,
        "input_path": str(source.resolve()),
        "output_dir": str(out.resolve()),
    }

    try:
        json_path = render_json(result, out)
        typer.echo(f"Wrote result (JSON): {json_path.resolve()}")
    except Exception as e:
        typer.echo(f"Error writing JSON: {e}", err=True)
        raise

    try:
        meta_path = write_run_metadata(run_meta, out)
        typer.echo(f"Wrote run metadata (JSON): {meta_path.resolve()}")
    except Exception as e:
        typer.echo(f"Error writing run metadata: {e}", err=True)
        raise


@app.command()
def toposort(
    graph: GraphOpt,
    config_path: ConfigOpt = None,
    out: OutOpt = Path("."),
    verbose: VerboseOpt = False,
) -> None:
    """Compute a dependency order for a graph."""
    _setup(verbose)
    cfg = load_config(config_path)
    result = TopologicalSortResult.model_validate_json(
        codec.topological_sort(_read_input(graph), cfg)
    )

    gate_passed = not (cfg.gating.fail_on_cycle and result.has_cycle)
    render_toposort(result, gate_passed)
    _write_reports(result, out, "toposort", graph)

    if not gate_passed:
        raise SystemExit(1)


@app.command()
def cycles(
    graph: GraphOpt,
    config_path: ConfigOpt = None,
    out: OutOpt = Path("."),
    verbose: VerboseOpt = False,
) -> None:
    """Detect cycles in a graph."""
    _setup(verbose)
    cfg = load_config(config_path)
    result = CycleDetectionResult.model_validate_json(
        codec.detect_cycles(_read_input(graph), cfg)
    )

    gate_passed = not (cfg.gating.fail_on_cycle and result.has_cycle)
    render_cycles(result, gate_passed)
    _write_reports(result, out, "cycles", graph)

    if not gate_passed:
        raise SystemExit(1)


@app.command()
def path(
    graph: GraphOpt,
    from_id: Annotated[str, typer.Option("--from", help="Source node id")],
    to_id: Annotated[str, typer.Option("--to", help="Target node id")],
    config_path: ConfigOpt = None,
    out: OutOpt = Path("."),
    verbose: VerboseOpt = False,
) -> None:
    """Find the fewest-hop path between two nodes."""
    _setup(verbose)
    cfg = load_config(config_path)
    result = PathResult.model_validate_json(
        codec.find_path(_read_input(graph), from_id, to_id, cfg)
    )

    gate_passed = not (cfg.gating.fail_on_missing_path and not result.exists)
    render_path(result, from_id, to_id, gate_passed)
    _write_reports(result, out, "path", graph)

    if not gate_passed:
        raise SystemExit(1)


@app.command()
def build(
    relationships: Annotated[
        Path, typer.Option("--relationships", help="Path to relationships JSON file")
    ],
    config_path: ConfigOpt = None,
    out: OutOpt = Path("."),
    verbose: VerboseOpt = False,
) -> None:
    """Build a graph from a list of relationships."""
    _setup(verbose)
    cfg = load_config(config_path)
    result = Graph.model_validate_json(codec.build_dag(_read_input(relationships), cfg))

    render_graph(result)
    _write_reports(result, out, "build", relationships)
