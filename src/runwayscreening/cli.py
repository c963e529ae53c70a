"""Typer CLI entrypoint for the screening pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import typer
from pydantic import ValidationError

from .config import load_settings
from .container import create_container
from .errors import IncompleteSubmission
from .logging import configure_logging

app = typer.Typer(help="Rank resumes against a job description.")


@app.command()
def run(
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job description text file."),
    resumes: List[Path] = typer.Option(
        ...,
        "--resumes",
        "-r",
        exists=True,
        readable=True,
        help="Resume file or directory; repeat for several.",
    ),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Dashboard JSON output path.",
    ),
    export_dir: Optional[Path] = typer.Option(
        None, file_okay=False, help="Directory for the CSV ranking export."
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible placeholder scores."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Score, rank and optionally export candidates."""
    try:
        settings: dict[str, Any] = load_settings(config)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc
    if seed is not None:
        settings["scorer"] = {**settings.get("scorer", {}), "seed": seed}

    configure_logging(log_level)

    try:
        container = create_container(settings=settings)
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc
    pipeline = container.pipeline()

    try:
        report = pipeline.run(
            job_path=job,
            resume_paths=resumes,
            output_path=output,
            export_dir=export_dir,
        )
    except IncompleteSubmission as exc:
        raise typer.BadParameter("; ".join(exc.reasons)) from exc

    typer.echo(f"Processed {report.summary.total_candidates} candidates. Results saved to {output}.")
    if report.top_candidate is not None:
        top = report.top_candidate
        typer.echo(f"Top candidate: {top.display_name} ({top.score}%).")
    if report.export_path is not None:
        typer.echo(f"Exported ranking to {report.export_path}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
