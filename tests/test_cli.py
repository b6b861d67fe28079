"""Tests for the command line entrypoint."""

import json
from pathlib import Path

from clique_points.__main__ import (
    EXIT_FAILURE,
    EXIT_INVALID_PARAMETER,
    EXIT_OK,
    main,
)
from clique_points.io.stores.sqlite import SqliteMessageStore


FIXTURE_PATH = str(Path(__file__).parent / "fixtures" / "messages.json")


def test_points_json_output(capsys):
    code = main([
        "--fixture-path", FIXTURE_PATH,
        "points", "--period", "day", "--guild", "2", "--output", "json",
    ])

    assert code == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {
            "period": "2024-01-16T00:00:00Z",
            "data": [{"user_1": 3, "user_2": 1, "points": 1}],
        }
    ]


def test_points_pretty_output(capsys):
    code = main(["--fixture-path", FIXTURE_PATH, "points", "--period", "week"])

    assert code == EXIT_OK
    out = capsys.readouterr().out
    assert "During the period beginning 2024-01-15T00:00:00+00:00:" in out
    assert "User 2 and user 1 spoke 2 times" in out


def test_invalid_period_reports_error_body(capsys):
    code = main(["--fixture-path", FIXTURE_PATH, "points", "--period", "fortnight"])

    assert code == EXIT_INVALID_PARAMETER
    body = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert body["code"] == "invalid_parameter"


def test_missing_fixture_reports_store_error(tmp_path, capsys):
    code = main([
        "--fixture-path", str(tmp_path / "missing.json"),
        "points", "--period", "day",
    ])

    assert code == EXIT_FAILURE
    body = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert body["code"] == "database_connection"


def test_ingest_then_query_sqlite(tmp_path, capsys):
    db_path = str(tmp_path / "cli.db")

    assert main(["--db-path", db_path, "ingest", FIXTURE_PATH]) == EXIT_OK
    assert "ingested: 6" in capsys.readouterr().out

    with SqliteMessageStore(db_path) as store:
        store.insert_user(1, "alice")
        store.insert_user(2, "bob")

    code = main([
        "--store", "sqlite", "--db-path", db_path,
        "points", "--period", "hour", "--before", "2024-01-15T11:00:00Z",
    ])

    assert code == EXIT_OK
    assert "User 2 (bob) and user 1 (alice) spoke 2 times" in capsys.readouterr().out


def test_ingest_twice_fails(tmp_path, capsys):
    db_path = str(tmp_path / "twice.db")

    assert main(["--db-path", db_path, "ingest", FIXTURE_PATH]) == EXIT_OK
    assert main(["--db-path", db_path, "ingest", FIXTURE_PATH]) == EXIT_FAILURE
