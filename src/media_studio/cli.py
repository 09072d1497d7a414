"""Command-line entrypoint for the Media Studio."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import StudioSettings, load_config
from .production import PRODUCT_TYPES, InvalidProductType, run_new_product
from .scheduler import ManualScheduler, Scheduler, ThreadingScheduler

app = typer.Typer(add_completion=False, help="Create and release movies and series.")


def setup_logging(log_dir: Path) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_dir / "studio.log", encoding="utf-8"),
        ],
    )


@app.command()
def release(
    product_type: str = typer.Argument(..., help="What to release: movie or series."),
    config_path: Optional[str] = typer.Option(None, help="Path to config JSON."),
    simulate: bool = typer.Option(False, help="Fire every deferred release immediately."),
    wait: bool = typer.Option(False, help="Stay running until every deferred release is out."),
):
    """Create a new product and release it."""
    if simulate and wait:
        raise typer.BadParameter("--simulate and --wait cannot be combined.", param_hint="--wait")
    cfg = load_config(config_path)
    settings = StudioSettings.from_config(cfg)
    setup_logging(settings.logs_dir)

    scheduler: Scheduler = ManualScheduler() if simulate else ThreadingScheduler()
    try:
        run_new_product(product_type, scheduler=scheduler, settings=settings)
    except InvalidProductType as exc:
        typer.echo(f"{exc}. Supported: {', '.join(PRODUCT_TYPES)}", err=True)
        raise typer.Exit(code=2)

    if isinstance(scheduler, ManualScheduler):
        fired = scheduler.run_all()
        logging.info("Simulated %d deferred release(s).", fired)
    elif wait:
        logging.info("Waiting for %d deferred release(s)...", scheduler.pending)
        scheduler.wait()
        logging.info("Done.")
    elif scheduler.pending:
        logging.warning("Exiting with %d deferred release(s) pending.", scheduler.pending)


@app.command("types")
def list_types():
    """List the product types the studio can make."""
    for product_type in PRODUCT_TYPES:
        typer.echo(product_type)


def main():
    app()


if __name__ == "__main__":
    main()
