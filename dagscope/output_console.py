"""Console output — TTY summaries with Rich tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from dagscope.model import (
        CycleDetectionResult,
        Graph,
        PathResult,
        TopologicalSortResult,
    )


def render_toposort(result: TopologicalSortResult, gate_passed: bool) -> None:
    console = Console()

    table = Table(title="Dependency Order")
    table.add_column("#", justify="right")
    table.add_column("Node", style="bold")
    for i, node in enumerate(result.sorted, start=1):
        table.add_row(str(i), node)
    console.print(table)

    if result.has_cycle:
        console.print("[red]Cycle detected[/red]: order is partial")
    _print_gate(console, gate_passed)


def render_cycles(result: CycleDetectionResult, gate_passed: bool) -> None:
    console = Console()

    if not result.has_cycle:
        console.print("No cycles found")
    else:
        console.print(f"[bold]Cycles found:[/bold] {len(result.cycles)} reported")
        for cycle in result.cycles:
            walk = " -> ".join([*cycle, cycle[0]])
            console.print(f"  ({len(cycle)} nodes) {walk}")
    _print_gate(console, gate_passed)


def render_path(result: PathResult, from_id: str, to_id: str, gate_passed: bool) -> None:
    console = Console()

    if result.exists:
        hops = len(result.path) - 1
        console.print(f"[bold]Path[/bold] ({hops} hops, distance {result.distance}):")
        console.print(f"  {' -> '.join(result.path)}")
    else:
        console.print(f"No path from {from_id} to {to_id}")
    _print_gate(console, gate_passed)


def render_graph(graph: Graph) -> None:
    console = Console()

    table = Table(title="Edges")
    table.add_column("From", style="bold")
    table.add_column("To", style="bold")
    table.add_column("Weight", justify="right")
    for edge in graph.edges:
        weight = "-" if edge.weight is None else f"{edge.weight:g}"
        table.add_row(edge.from_, edge.to, weight)
    console.print(table)
    console.print(f"\nNodes: {len(graph.nodes)}, edges: {len(graph.edges)}")


def _print_gate(console: Console, gate_passed: bool) -> None:
    status = "[green]PASSED[/green]" if gate_passed else "[red]FAILED[/red]"
    console.print(f"Gate: {status}")
