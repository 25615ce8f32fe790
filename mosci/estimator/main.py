"""Estimator module main entry point.

This module provides the ``mosci`` command, which reads a ratings matrix
from a CSV file (or generates demonstration ratings when none is given),
estimates the MOS and the eight confidence intervals of every test
condition, prints them as a table and optionally exports the report.

Dependencies:
    - mosci.common.yaml_config: Estimator configuration loading
    - mosci.common.persistence: Ratings input and report output
    - mosci.common.display: Console output and formatting
    - mosci.estimator.engine: Interval estimation
"""

import csv
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from mosci.common.config import ConfigError, EstimatorConfig, Settings
from mosci.common.display import (
    create_report_table,
    create_summary_panel,
    failed_badge,
    get_console,
    success_badge,
)
from mosci.common.logging import configure_log_path, generate_id, get_logger, set_run_id
from mosci.common.persistence import load_ratings_csv, write_report_csv, write_report_json
from mosci.common.yaml_config import load_estimator_config
from mosci.estimator.engine import estimate_with_config
from mosci.estimator.errors import StatisticalError
from mosci.generator.demo import (
    DEFAULT_NUM_CONDITIONS,
    DEFAULT_NUM_SUBJECTS,
    generate_demo_ratings,
)

app = typer.Typer()

logger = get_logger("estimator.main")


def _resolve_config(config_path: Path, overrides: dict[str, object]) -> EstimatorConfig:
    base = load_estimator_config(str(config_path))
    values = base.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return EstimatorConfig(**values)


@app.command()
def main(
    ratings_csv: Annotated[
        Path | None,
        typer.Argument(help="CSV file, one row per test condition, one column per subject"),
    ] = None,
    alpha: Annotated[
        float | None, typer.Option("--alpha", help="Significance level (default 0.05)")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Random seed for bootstrap and demo data")
    ] = None,
    iterations: Annotated[
        int | None, typer.Option("--iterations", help="Bootstrap resamples per test condition")
    ] = None,
    workers: Annotated[
        int | None, typer.Option("--workers", help="Threads used to process test conditions")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to YAML config file")
    ] = None,
    json_out: Annotated[
        Path | None, typer.Option("--json-out", help="Write the report as JSON to this path")
    ] = None,
    csv_out: Annotated[
        Path | None, typer.Option("--csv-out", help="Write the report as CSV to this path")
    ] = None,
    header: Annotated[
        bool | None,
        typer.Option(
            "--header/--no-header",
            help="Whether the CSV starts with a header line (default: guess)",
        ),
    ] = None,
    demo_conditions: Annotated[
        int, typer.Option("--demo-conditions", help="Test conditions of the demo data")
    ] = DEFAULT_NUM_CONDITIONS,
    demo_subjects: Annotated[
        int, typer.Option("--demo-subjects", help="Subjects of the demo data")
    ] = DEFAULT_NUM_SUBJECTS,
) -> None:
    """Estimate confidence intervals for mean opinion scores.

    Computes bootstrap, normal, Student-t, Wald, Wilson, Clopper-Pearson,
    simultaneous and Jeffreys intervals for every test condition.
    """
    console = get_console()
    settings = Settings()

    configure_log_path(settings.log_path)
    set_run_id(generate_id())

    try:
        config = _resolve_config(
            config_path or Path(settings.config_path),
            {
                "alpha": alpha,
                "seed": seed,
                "bootstrap_iterations": iterations,
                "max_workers": workers,
            },
        )
    except (ConfigError, ValidationError) as e:
        console.print(failed_badge(), f"[error]Invalid configuration: {escape(str(e))}[/error]")
        sys.exit(1)

    labels: list[str] | None = None
    if ratings_csv is None:
        console.print(
            f"[dim]No ratings given, generating demo data: {demo_conditions} test conditions "
            f"x {demo_subjects} subjects[/dim]"
        )
        try:
            ratings = generate_demo_ratings(
                demo_conditions, demo_subjects, scale=config.scale, seed=config.seed
            )
        except ValueError as e:
            console.print(failed_badge(), f"[error]{escape(str(e))}[/error]")
            sys.exit(1)
    else:
        try:
            ratings, labels = load_ratings_csv(ratings_csv, has_header=header)
        except FileNotFoundError:
            console.print(failed_badge(), f"[error]Ratings file not found: {ratings_csv}[/error]")
            sys.exit(1)
        except (UnicodeDecodeError, csv.Error) as e:
            console.print(
                failed_badge(),
                f"[error]Unreadable ratings file {ratings_csv}: {escape(str(e))}[/error]",
            )
            sys.exit(1)

    try:
        report = estimate_with_config(ratings, config)
    except StatisticalError as e:
        console.print(failed_badge(), f"[error]{escape(str(e))}[/error]")
        sys.exit(1)

    console.print(create_report_table(report, labels))
    console.print()
    console.print(create_summary_panel(report))

    if json_out is not None:
        write_report_json(report, json_out)
        console.print(success_badge(), f"{json_out} written", style="success")
    if csv_out is not None:
        write_report_csv(report, csv_out, labels)
        console.print(success_badge(), f"{csv_out} written", style="success")

    logger.info(
        "Report produced",
        {
            "source": str(ratings_csv) if ratings_csv else "demo",
            "conditions": report.num_conditions,
            "json_out": str(json_out) if json_out else None,
            "csv_out": str(csv_out) if csv_out else None,
        },
    )


if __name__ == "__main__":
    app()
