import json
from pathlib import Path

from click.testing import CliRunner

from simdata.cli import cli
from simdata.constants import MISSING_EVENT_T0

from .conftest import ALICE, BOB, EMITTER, TRANSFER_T0, address_topic, encode_data


def test_format_apr_command(tmp_path: Path) -> None:
    usd = tmp_path / "USDC.csv"
    eth = tmp_path / "WETH.csv"
    usd.write_text("reserve,apr,day\nusdc,2.5,2021-01-01T00:00:00Z\n")
    eth.write_text("reserve,apr,day\n")
    out = tmp_path / "apr.json"

    result = CliRunner().invoke(
        cli, ["-q", "format-apr", "--usd-csv", str(usd), "--eth-csv", str(eth), "--out", str(out)]
    )

    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text()) == {
        "usd": [{"timestamp": 1609459200, "apr": 2500000000000000000}],
        "eth": [],
    }


def test_format_apr_command_reports_malformed_rows(tmp_path: Path) -> None:
    usd = tmp_path / "USDC.csv"
    usd.write_text("reserve,apr,day\nusdc,oops,2021-01-01T00:00:00Z\n")

    result = CliRunner().invoke(
        cli, ["-q", "format-apr", "--usd-csv", str(usd), "--eth-csv", str(usd), "--out", str(tmp_path / "a.json")]
    )

    assert result.exit_code == 1
    assert "non-blank data row 1" in result.output


def test_format_events_command(tmp_path: Path, artifacts_dir: Path) -> None:
    events_csv = tmp_path / "rawEventsOut.csv"
    events_csv.write_text(
        "eventNumber,emitter,data,topic0,topic1,topic2\n"
        f"0,{EMITTER},{encode_data(['uint256'], [1])},{TRANSFER_T0},{address_topic(ALICE)},{address_topic(BOB)}\n"
        f"1,{EMITTER},0x,{MISSING_EVENT_T0},,\n"
    )
    out = tmp_path / "events.json"

    result = CliRunner().invoke(
        cli,
        [
            "-q",
            "format-events",
            "--events-csv",
            str(events_csv),
            "--artifacts-dir",
            str(artifacts_dir),
            "--artifact",
            "ERC20",
            "--artifact",
            "Vault",
            "--out",
            str(out),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "1/2" in result.output
    assert MISSING_EVENT_T0 in result.output
    assert [e["eventName"] for e in json.loads(out.read_text())] == ["Transfer"]
