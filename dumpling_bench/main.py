from __future__ import annotations

import subprocess
import sys
from typing import Optional

import pymysql
import typer
from pydantic import ValidationError

from dumpling_bench.config import get_settings
from dumpling_bench.domain.models import RunConfig
from dumpling_bench.orchestrator import run_bench
from dumpling_bench.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

# Exit status typer/click use for usage errors (bad flag, bad value).
USAGE_ERROR_EXIT = 2

app = typer.Typer(
    help="Dumpling_bench is a CLI tool that helps you bench Dumpling.",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


@app.command(
    context_settings={"help_option_names": ["-h", "--help"], "allow_extra_args": True},
)
def bench(
    ctx: typer.Context,
    rows: Optional[int] = typer.Option(
        None,
        "--rows",
        help="Number of rows to generate in a table. [default: 100000]",
    ),
    chunk_rows: Optional[int] = typer.Option(
        None,
        "--chk_rows",
        help="Number of rows per chunk passed to dumpling. [default: 10000]",
    ),
    regions: Optional[int] = typer.Option(
        None,
        "--regions",
        help="Number of regions to pre-split the table into, 0 disables. [default: 16]",
    ),
    skewed: str = typer.Option(
        "false",
        "--skewed",
        is_flag=False,
        flag_value="true",
        metavar="[=BOOL]",
        show_default=False,
        help="Insert one row with an extreme primary key (--skewed or --skewed=true|false).",
    ),
    dumpling_bin: Optional[str] = typer.Option(
        None,
        "--dumpling",
        help="The dumpling binary. [default: ./dumpling]",
    ),
    action: str = typer.Option(
        "all",
        "--action",
        help="{prepare|run|all}",
    ),
) -> None:
    """
    Prepare the benchmark table and/or time one dumpling export of it.
    """
    if ctx.args:
        typer.echo(f"meet some unparsed arguments, please check again: {ctx.args}", err=True)
        raise typer.Exit(code=1)

    try:
        settings = get_settings()
        config = RunConfig(
            rows=rows if rows is not None else settings.benchmark_rows,
            chunk_rows=chunk_rows if chunk_rows is not None else settings.benchmark_chunk_rows,
            regions=regions if regions is not None else settings.benchmark_regions,
            skewed=skewed,
            dumpling_bin=dumpling_bin or settings.dumpling_bin,
            action=action,
        )
    except ValidationError as exc:
        typer.echo(f"parse arguments failed: {_describe(exc)}", err=True)
        raise typer.Exit(code=1) from None

    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        run_bench(config, settings)
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=130) from None
    except (pymysql.MySQLError, subprocess.CalledProcessError, OSError):
        log.exception("dumpling-bench failed")
        raise typer.Exit(code=1) from None


def main() -> None:
    try:
        app()
    except SystemExit as exc:
        if exc.code == USAGE_ERROR_EXIT:
            sys.exit(1)
        raise
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
