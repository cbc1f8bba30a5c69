from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.boards.client import BoardStoreError
from adapters.excalidraw.repository import FileSystemExcalidrawRepository
from adapters.excalidraw.url_encoder import SceneUrlTooLongError, build_excalidraw_url
from adapters.filesystem.json_utils import JsonPayloadError, load_json_object
from app.config import AppSettings, load_settings
from app.diagram_wiring import build_board_store, create_architecture_diagram, create_flowchart
from domain.models import ArchitecturePayload, FlowchartPayload, GeneratedDiagram

app = typer.Typer(no_args_is_help=True)
console = Console()

ConfigOption = typer.Option(None, "--config", help="YAML settings file.")
OutputOption = typer.Option(
    None, "--output", "-o", help="Write the scene to this .excalidraw file."
)
BoardOption = typer.Option(None, "--board-id", help="Persist the diagram to this whiteboard.")
LinkOption = typer.Option(False, "--link", help="Print a shareable Excalidraw link.")


def _setup(config_path: Path | None) -> AppSettings:
    settings = load_settings(config_path)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings


def _read_payload(input_path: Path) -> dict:
    if not input_path.exists():
        console.print(f"[red]File not found:[/] {input_path}")
        raise typer.Exit(code=1)
    try:
        return load_json_object(input_path)
    except JsonPayloadError as exc:
        console.print(f"[red]Invalid input:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _publish(
    diagram: GeneratedDiagram,
    settings: AppSettings,
    output: Path | None,
    board_id: str | None,
    link: bool,
    title: str,
    default_name: str,
) -> None:
    if output is None and board_id is None and not link:
        output = settings.output.scenes_dir / f"{default_name}.excalidraw"

    if output is not None:
        FileSystemExcalidrawRepository().save(diagram.document, output)
        console.print(f"[green]Wrote[/] {output}")

    if board_id is not None:
        store = build_board_store(settings)
        try:
            store.save_diagram(board_id, diagram.document)
        except BoardStoreError as exc:
            console.print(f"[red]Error:[/] {escape(str(exc))}")
            raise typer.Exit(code=1) from exc
        finally:
            store.close()
        console.print(f"[green]{title} created successfully![/] Saved to board {board_id}.")

    if link:
        try:
            url = build_excalidraw_url(
                settings.output.excalidraw_base_url,
                diagram.document.to_scene(),
                max_length=settings.output.max_url_length,
            )
        except SceneUrlTooLongError as exc:
            console.print(f"[yellow]No link:[/] {escape(str(exc))}")
        else:
            console.print(url, soft_wrap=True)

    console.print(f"Generated {diagram.element_count} Excalidraw elements.")


@app.command("flowchart")
def flowchart(
    input_path: Path = typer.Argument(..., help="JSON file with 'nodes' and 'edges'."),
    output: Optional[Path] = OutputOption,
    board_id: Optional[str] = BoardOption,
    link: bool = LinkOption,
    config: Optional[Path] = ConfigOption,
) -> None:
    settings = _setup(config)
    try:
        payload = FlowchartPayload.model_validate(_read_payload(input_path))
    except ValidationError as exc:
        console.print(f"[red]Invalid flowchart:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    diagram = create_flowchart(payload.nodes, payload.edges)
    _publish(
        diagram,
        settings,
        output,
        board_id,
        link,
        title="Flowchart",
        default_name=input_path.stem,
    )


@app.command("architecture")
def architecture(
    input_path: Path = typer.Argument(..., help="JSON file with 'components' and 'connections'."),
    output: Optional[Path] = OutputOption,
    board_id: Optional[str] = BoardOption,
    link: bool = LinkOption,
    config: Optional[Path] = ConfigOption,
) -> None:
    settings = _setup(config)
    try:
        payload = ArchitecturePayload.model_validate(_read_payload(input_path))
    except ValidationError as exc:
        console.print(f"[red]Invalid architecture diagram:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    diagram = create_architecture_diagram(payload.components, payload.connections)
    _publish(
        diagram,
        settings,
        output,
        board_id,
        link,
        title="Architecture diagram",
        default_name=input_path.stem,
    )


@app.command("validate")
def validate(
    input_path: Path = typer.Argument(..., help="Flowchart or architecture JSON file."),
) -> None:
    data = _read_payload(input_path)
    try:
        if "components" in data or "connections" in data:
            ArchitecturePayload.model_validate(data)
            console.print(f"[green]Valid architecture payload:[/] {input_path}")
        else:
            FlowchartPayload.model_validate(data)
            console.print(f"[green]Valid flowchart payload:[/] {input_path}")
    except ValidationError as exc:
        console.print(f"[red]Validation failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
