"""
Command-line interface for scraping xG shot maps and serving the API.
Usage examples:
  python -m xgstats.apps.cli scrape https://xgstat.com/.../12345 --save
  python -m xgstats.apps.cli show 12345
  python -m xgstats.apps.cli serve --port 8080
"""

import asyncio
import dataclasses
import json
from pathlib import Path
from typing import Optional

import click
from sqlalchemy.exc import SQLAlchemyError

from xgstats.common.logging_utils import configure_logging
from xgstats.common.playwright_utils import RenderError
from xgstats.core.config import Settings, settings
from xgstats.data_collection.scrapers.xgstat.scraper import InvalidRequestError, XGStatScraper
from xgstats.database.manager import DatabaseManager
from xgstats.database.services.xgstat_fixtures import (
    FixtureNotFoundError,
    RepositoryError,
    get_fixture_by_id,
    save_fixture,
)
from xgstats.domain.models import Fixture


def _fixture_json(fixture: Fixture) -> str:
    return json.dumps(fixture.model_dump(mode="json"), indent=2, ensure_ascii=False)


def _open_db(cfg: Settings) -> DatabaseManager:
    db = DatabaseManager(cfg.database_url, echo=cfg.database_echo)
    try:
        db.initialize()
    except SQLAlchemyError as e:
        click.echo(f"Database unavailable: {e}", err=True)
        raise SystemExit(1)
    return db


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """xG shot map scraper"""
    cfg = ctx.obj if isinstance(ctx.obj, Settings) else settings
    configure_logging(cfg.log_level, cfg.log_format)
    ctx.obj = cfg


@cli.command()
@click.argument("url")
@click.option("--save", is_flag=True, help="Persist the fixture in the configured database.")
@click.option("--visible", is_flag=True, help="Show the browser window (overrides SCRAPER_HEADLESS).")
@click.option("--debug", is_flag=True, help="Trace every rendering step (overrides SCRAPER_DEBUG).")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON here instead of stdout.")
@click.pass_obj
def scrape(cfg: Settings, url: str, save: bool, visible: bool, debug: bool, output: Optional[Path]):
    """Scrape one xgstat.com match page"""
    options = cfg.render_options()
    if visible or debug:
        options = dataclasses.replace(
            options,
            headless=options.headless and not visible,
            debug=options.debug or debug,
        )
    scraper = XGStatScraper(options=options)

    try:
        fixture = asyncio.run(scraper.scrape(url))
    except (InvalidRequestError, RenderError) as e:
        click.echo(f"Scrape failed: {e}", err=True)
        raise SystemExit(1)

    if save:
        db = _open_db(cfg)
        try:
            save_fixture(db, fixture)
        except RepositoryError as e:
            click.echo(f"Failed to save data: {e}", err=True)
            raise SystemExit(1)
        finally:
            db.close()

    payload = _fixture_json(fixture)
    if output:
        output.write_text(payload + "\n", encoding="utf-8")
        click.echo(f"Wrote {fixture.home_team} vs {fixture.away_team} to {output}")
    else:
        click.echo(payload)


@cli.command()
@click.argument("fixture_id", type=int)
@click.pass_obj
def show(cfg: Settings, fixture_id: int):
    """Print a stored fixture by its external ID"""
    db = _open_db(cfg)
    try:
        fixture = get_fixture_by_id(db, fixture_id)
    except FixtureNotFoundError:
        click.echo(f"Fixture {fixture_id} not found", err=True)
        raise SystemExit(1)
    except RepositoryError as e:
        click.echo(f"Failed to load fixture {fixture_id}: {e}", err=True)
        raise SystemExit(1)
    finally:
        db.close()
    click.echo(_fixture_json(fixture))


@cli.command(name="init-db")
@click.pass_obj
def init_db(cfg: Settings):
    """Create the fixture and shot tables"""
    db = _open_db(cfg)
    db.close()
    click.echo(f"Tables ready in {cfg.database_url}")


@cli.command()
@click.option("--host", default=None, help="Bind address (default: API_HOST).")
@click.option("--port", type=int, default=None, help="Port (default: API_PORT).")
@click.pass_obj
def serve(cfg: Settings, host: Optional[str], port: Optional[int]):
    """Run the HTTP API with uvicorn"""
    import uvicorn

    from xgstats.api.main import create_fastapi_app

    app = create_fastapi_app(cfg)
    uvicorn.run(app, host=host or cfg.api_host, port=port or cfg.api_port, log_config=None)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
