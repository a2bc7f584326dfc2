"""CLI interface for the kinship engine."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import KinshipConfig
from .exceptions import KinshipError
from .loader import load_snapshot
from .logging import configure_logging
from .models import LineageFilter
from .traversal import PedigreeTraversal

app = typer.Typer(
    name="gps-kinship",
    help="Genealogical relationship queries over a family tree export",
    add_completion=False,
)
console = Console()

TreeArg = typer.Argument(..., help="Family tree JSON file")


def get_config() -> KinshipConfig:
    """Load configuration from environment."""
    from dotenv import load_dotenv

    load_dotenv()
    config = KinshipConfig.from_env()
    configure_logging(config.log_level)
    return config


def _open(tree: Path) -> PedigreeTraversal:
    get_config()
    try:
        return PedigreeTraversal(load_snapshot(tree))
    except KinshipError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)


def _generations(value: int | None) -> int | None:
    if value is None:
        return get_config().max_generations
    return value


def _name(traversal: PedigreeTraversal, person_id: str) -> str:
    person = traversal.snapshot.person(person_id)
    return person.full_name if person else person_id


def _require(traversal: PedigreeTraversal, *person_ids: str) -> None:
    for person_id in person_ids:
        if person_id not in traversal.snapshot:
            console.print(f"[red]Error: Unknown person id '{person_id}'[/red]", soft_wrap=True)
            raise typer.Exit(1)


def _emit_json(payload) -> None:
    console.print_json(json.dumps(payload))


@app.command()
def stats(tree: Path = TreeArg):
    """Show the size of a family tree."""
    traversal = _open(tree)

    table = Table(title="Family Tree Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")
    for metric, count in traversal.snapshot.stats().items():
        table.add_row(metric.replace("_", " "), str(count))
    console.print(table)


@app.command()
def ancestors(
    tree: Path = TreeArg,
    person_id: str = typer.Argument(..., help="Person to start from"),
    generations: int = typer.Option(None, "--generations", "-g", min=0, help="Maximum generations"),
    lineage: LineageFilter = typer.Option(LineageFilter.ALL, "--lineage", "-l", help="paternal, maternal or all"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """List the ancestors of a person."""
    traversal = _open(tree)
    _require(traversal, person_id)
    results = traversal.get_ancestors(person_id, _generations(generations), lineage.value)

    if as_json:
        _emit_json([r.to_dict() for r in results])
        return

    table = Table(title=f"Ancestors of {_name(traversal, person_id)}")
    table.add_column("Gen", justify="right")
    table.add_column("Relationship", style="cyan")
    table.add_column("Name")
    table.add_column("Lineage")
    for r in results:
        table.add_row(str(r.generation), r.relationship_label, r.person.full_name, r.lineage.value)
    console.print(table)
    console.print(f"[dim]{len(results)} ancestors[/dim]")


@app.command()
def descendants(
    tree: Path = TreeArg,
    person_id: str = typer.Argument(..., help="Person to start from"),
    generations: int = typer.Option(None, "--generations", "-g", min=0, help="Maximum generations"),
    living: bool = typer.Option(False, "--living", help="Only living descendants"),
    deceased: bool = typer.Option(False, "--deceased", help="Only deceased descendants"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """List the descendants of a person."""
    traversal = _open(tree)
    _require(traversal, person_id)
    results = traversal.get_descendants(person_id, _generations(generations), living, deceased)

    if as_json:
        _emit_json([r.to_dict() for r in results])
        return

    table = Table(title=f"Descendants of {_name(traversal, person_id)}")
    table.add_column("Gen", justify="right")
    table.add_column("Relationship", style="cyan")
    table.add_column("Name")
    table.add_column("Living")
    for r in results:
        living_flag = "?" if r.person.is_living is None else ("yes" if r.person.is_living else "no")
        table.add_row(str(r.generation), r.relationship_label, r.person.full_name, living_flag)
    console.print(table)
    console.print(f"[dim]{len(results)} descendants[/dim]")


@app.command()
def relatives(
    tree: Path = TreeArg,
    person_id: str = typer.Argument(..., help="Person to start from"),
    up: int = typer.Option(None, "--up", min=0, help="Maximum ancestor generations"),
    down: int = typer.Option(None, "--down", min=0, help="Maximum descendant generations"),
):
    """Count ancestors and descendants of a person."""
    traversal = _open(tree)
    _require(traversal, person_id)
    result = traversal.get_all_relatives(person_id, _generations(up), _generations(down))
    _emit_json(
        {
            "person_id": person_id,
            "ancestors": len(result.ancestors),
            "descendants": len(result.descendants),
            "total_count": result.total_count,
        }
    )


@app.command("common-ancestor")
def common_ancestor(
    tree: Path = TreeArg,
    person1_id: str = typer.Argument(..., help="First person"),
    person2_id: str = typer.Argument(..., help="Second person"),
    show_all: bool = typer.Option(False, "--all", "-a", help="List every shared ancestor"),
):
    """Find the common ancestor(s) of two people."""
    traversal = _open(tree)
    _require(traversal, person1_id, person2_id)

    if show_all:
        results = traversal.find_all_common_ancestors(person1_id, person2_id)
    else:
        nearest = traversal.find_common_ancestor(person1_id, person2_id)
        results = [nearest] if nearest else []

    if not results:
        console.print("[yellow]No common ancestor found[/yellow]")
        return

    table = Table(title="Common Ancestors")
    table.add_column("Name")
    table.add_column(f"From {_name(traversal, person1_id)}", justify="right")
    table.add_column(f"From {_name(traversal, person2_id)}", justify="right")
    for r in results:
        table.add_row(r.ancestor.full_name, str(r.distance1), str(r.distance2))
    console.print(table)


@app.command()
def cousins(
    tree: Path = TreeArg,
    person_id: str = typer.Argument(..., help="Person to find cousins for"),
    degree: int = typer.Option(1, "--degree", "-d", help="1 = first cousins, 2 = second, ..."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """List the cousins of a person at a given degree."""
    traversal = _open(tree)
    _require(traversal, person_id)
    results = traversal.find_cousins(person_id, degree)

    if as_json:
        _emit_json([r.to_dict() for r in results])
        return

    if not results:
        console.print(f"[yellow]No cousins of degree {degree} found[/yellow]")
        return

    table = Table(title=f"Cousins of {_name(traversal, person_id)}")
    table.add_column("Name")
    table.add_column("Relationship", style="cyan")
    for r in results:
        table.add_row(r.person.full_name, r.label)
    console.print(table)


@app.command()
def path(
    tree: Path = TreeArg,
    person1_id: str = typer.Argument(..., help="Starting person"),
    person2_id: str = typer.Argument(..., help="Target person"),
    neutral: bool = typer.Option(None, "--neutral/--gendered", help="Neutral wording for unknown gender"),
):
    """Show the shortest relationship path between two people."""
    traversal = _open(tree)
    _require(traversal, person1_id, person2_id)
    if neutral is None:
        neutral = get_config().gender_neutral_labels
    result = traversal.find_relationship_path(person1_id, person2_id, gender_neutral=neutral)

    if result is None:
        console.print("[yellow]No relationship path found[/yellow]")
        return

    steps = [result.path[0].full_name]
    for kind, person in zip(result.edge_types, result.path[1:]):
        steps.append(f"--{kind.value}--> {person.full_name}")

    console.print(
        Panel(
            "\n".join(steps),
            title=f"[bold]{result.relationship}[/bold] (distance {result.distance})",
        )
    )


@app.command()
def kinship(
    tree: Path = TreeArg,
    person_a_id: str = typer.Argument(..., help="Reference person"),
    person_b_id: str = typer.Argument(..., help="Person to describe"),
):
    """Describe how two people are related by blood."""
    traversal = _open(tree)
    _require(traversal, person_a_id, person_b_id)
    result = traversal.describe_kinship(person_a_id, person_b_id)

    if result is None:
        console.print("[yellow]No blood relationship found[/yellow]")
        return

    console.print(
        f"[bold]{result.person_b.full_name}[/bold] is the [cyan]{result.relationship}[/cyan] "
        f"of [bold]{result.person_a.full_name}[/bold]"
    )
    if result.common_ancestor is not None and result.degree_of_relationship > 0:
        console.print(
            f"[dim]Common ancestor: {result.common_ancestor.full_name} "
            f"({result.generations_to_common_ancestor_a}/{result.generations_to_common_ancestor_b} generations)[/dim]"
        )


if __name__ == "__main__":
    app()
