from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from cli.app import app
from cli.loader import AirportRow

AIRPORTS_DAT = (
    '1,"General Edward Lawrence Logan Intl","Boston","United States","BOS","KBOS",'
    "42.364347,-71.005181,19,-5,\"A\"\n"
    '2,"Newark Liberty Intl","Newark","United States","EWR","KEWR",'
    "40.6925,-74.168667,18,-5,\"A\"\n"
    "this,line,is,malformed\n"
)


class StubClient:
    def __init__(self, config, rejected: set[str] | None = None) -> None:
        self.config = config
        self.rejected = rejected or set()
        self.added: List[AirportRow] = []
        self.queries: List[tuple[str, float]] = []
        self.closed = False

    def add_airport(self, row: AirportRow) -> bool:
        self.added.append(row)
        return row.iata not in self.rejected

    def list_airports(self) -> List[str]:
        return ["BOS", "EWR"]

    def query_weather(self, iata: str, radius: float) -> List[Dict[str, Any]]:
        self.queries.append((iata, radius))
        return [
            {
                "iata": iata,
                "wind": {"mean": 22.0, "first": 10, "second": 20, "third": 30, "count": 10},
                "last_update_time": "2024-01-01T00:00:00Z",
            }
        ]

    def health(self) -> Dict[str, Any]:
        return {"datasize": 1, "iata_freq": {"BOS": 1.0, "EWR": 0.0}, "radius_freq": [3, 0, 1]}

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _install_stub(monkeypatch, stub: StubClient) -> None:
    def factory(config):
        stub.config = config
        return stub

    monkeypatch.setattr("cli.app.ApiClient", factory)


def test_load_posts_each_well_formed_row(monkeypatch, runner: CliRunner, tmp_path) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)
    data_path = tmp_path / "airports.dat"
    data_path.write_text(AIRPORTS_DAT)

    result = runner.invoke(app, ["--base-url", "http://weather:9090/", "load", str(data_path)])

    assert result.exit_code == 0
    assert [row.iata for row in stub.added] == ["BOS", "EWR"]
    assert stub.added[0] == AirportRow(iata="BOS", latitude=42.364347, longitude=-71.005181)
    assert "loaded: 2" in result.stdout
    assert stub.config.base_url == "http://weather:9090"
    assert stub.closed is True


def test_load_fails_when_nothing_was_loaded(monkeypatch, runner: CliRunner, tmp_path) -> None:
    stub = StubClient(config=None, rejected={"BOS", "EWR"})
    _install_stub(monkeypatch, stub)
    data_path = tmp_path / "airports.dat"
    data_path.write_text(AIRPORTS_DAT)

    result = runner.invoke(app, ["load", str(data_path)])

    assert result.exit_code == 1
    assert "failed: 2" in result.stdout


def test_load_rejects_empty_file(monkeypatch, runner: CliRunner, tmp_path) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)
    data_path = tmp_path / "airports.dat"
    data_path.write_text("")

    result = runner.invoke(app, ["load", str(data_path)])

    assert result.exit_code == 1
    assert stub.added == []


def test_airports_command(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["airports"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["BOS", "EWR"]


def test_query_command(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["query", "JFK", "--radius", "200"])

    assert result.exit_code == 0
    assert stub.queries == [("JFK", 200.0)]
    assert "wind: mean=22.0" in result.stdout


def test_health_command(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["health"])

    assert result.exit_code == 0
    assert "datasize: 1" in result.stdout
    assert "BOS: 1.0" in result.stdout
    assert "buckets: 3" in result.stdout
    assert stub.closed is True
