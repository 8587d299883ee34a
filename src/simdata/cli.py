import asyncio
from pathlib import Path

import click
import httpx
from rich.console import Console

from simdata.constants import APR_MULTIPLIER, DEFAULT_ARTIFACTS, POOL_ADDRESS, POOL_DEPLOY_TIME, PRICE_MULTIPLIER
from simdata.core.errors import MalformedRowError
from simdata.logging_config import setup_logging

console = Console()

_PATH = click.Path(path_type=Path)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors")
def cli(verbose: bool, quiet: bool) -> None:
    """simdata — one-shot data formatters for the prize pool simulator."""
    setup_logging(verbose=verbose, quiet=quiet)


@cli.command("format-apr")
@click.option("--usd-csv", type=_PATH, default=Path("./USDC.csv"), show_default=True, help="USDC APR export")
@click.option("--eth-csv", type=_PATH, default=Path("./WETH.csv"), show_default=True, help="WETH APR export")
@click.option("--out", "out_path", type=_PATH, default=Path("./data/historicAaveApr.json"), show_default=True)
@click.option("--multiplier", type=int, default=APR_MULTIPLIER, show_default=True)
def format_apr_cmd(usd_csv: Path, eth_csv: Path, out_path: Path, multiplier: int) -> None:
    """Rescale downloaded Aave APR CSVs into historicAaveApr.json."""
    from simdata.api.jobs import format_apr
    from simdata.core.config import AprFormatConfig

    config = AprFormatConfig(usd_csv=usd_csv, eth_csv=eth_csv, out_path=out_path, multiplier=multiplier)
    try:
        out = format_apr(config)
    except MalformedRowError as e:
        raise click.ClickException(str(e)) from e
    console.print(f"[bold]done[/]: usd={len(out.usd)} eth={len(out.eth)} → {out.out_path}")


@cli.command("fetch-prices")
@click.option("--contract", default=POOL_ADDRESS, show_default=True, help="Token contract on Ethereum")
@click.option("--from-ts", type=int, default=POOL_DEPLOY_TIME, show_default=True, help="Range start (unix seconds)")
@click.option("--to-ts", type=int, default=None, help="Range end (unix seconds)  [default: now]")
@click.option("--out", "out_path", type=_PATH, default=Path("../config/historicPrices.json"), show_default=True)
@click.option("--multiplier", type=int, default=PRICE_MULTIPLIER, show_default=True)
def fetch_prices_cmd(contract: str, from_ts: int, to_ts: int | None, out_path: Path, multiplier: int) -> None:
    """Fetch CoinGecko USD/ETH prices into historicPrices.json."""
    from simdata.api.jobs import fetch_prices
    from simdata.core.config import PriceFetchConfig

    config = PriceFetchConfig(
        contract=contract,
        from_ts=from_ts,
        to_ts=to_ts,
        out_path=out_path,
        multiplier=multiplier,
    )
    try:
        out = asyncio.run(fetch_prices(config))
    except httpx.HTTPError as e:
        raise click.ClickException(f"price request failed: {e}") from e
    console.print(f"[bold]done[/]: usd={len(out.usd)} eth={len(out.eth)} → {out.out_path}")


@cli.command("format-events")
@click.option("--events-csv", type=_PATH, default=Path("../data/rawEventsOut.csv"), show_default=True)
@click.option("--artifacts-dir", type=_PATH, default=Path("../out"), show_default=True, help="Foundry out/ directory")
@click.option(
    "--artifact",
    "artifacts",
    multiple=True,
    help="Artifact name to load; repeat to add more  [default: simulator contracts]",
)
@click.option("--out", "out_path", type=_PATH, default=Path("../data/simulatorEvents.json"), show_default=True)
@click.option("--strict/--no-strict", default=False, show_default=True, help="Fail rows whose data does not decode")
def format_events_cmd(
    events_csv: Path,
    artifacts_dir: Path,
    artifacts: tuple[str, ...],
    out_path: Path,
    strict: bool,
) -> None:
    """Decode simulator event logs into simulatorEvents.json."""
    from simdata.api.jobs import format_events
    from simdata.core.config import EventFormatConfig

    config = EventFormatConfig(
        events_csv=events_csv,
        artifacts_dir=artifacts_dir,
        artifact_names=artifacts or DEFAULT_ARTIFACTS,
        out_path=out_path,
        strict=strict,
    )
    try:
        out = format_events(config)
    except MalformedRowError as e:
        raise click.ClickException(str(e)) from e

    stats = out.decoded.stats
    console.print(f"[bold]done[/]: {stats.decoded}/{stats.rows} events → {out.out_path}")
    if stats.failed:
        console.print(f"[bold]failed[/]: [red]{stats.failed}[/] rows")
        for topic0, n in stats.failed_by_topic0.most_common():
            console.print(f"  {topic0}  ×{n}")


if __name__ == "__main__":
    cli()
