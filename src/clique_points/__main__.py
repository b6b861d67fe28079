"""CLI entrypoint for clique_points."""

import argparse
import os
import sys
from typing import Callable, List, Optional

from .core import (
    CliqueError,
    ErrorBody,
    Granularity,
    InvalidParameterError,
    PeriodAggregate,
    PointsQuery,
    serialize_aggregates,
)
from .io.stores import FixtureMessageStore, MessageStore
from .pipeline import PointsEngine

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_PARAMETER = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clique_points",
        description="Clique points - pairwise interaction strength per period",
    )
    parser.add_argument(
        "--store",
        choices=["fixtures", "sqlite"],
        default=os.getenv("CLIQUE_STORE", "fixtures"),
        help="Message store to read from (default: fixtures)",
    )
    parser.add_argument(
        "--fixture-path",
        default=os.getenv("CLIQUE_FIXTURE_PATH", "tests/fixtures/messages.json"),
        help="Path to fixtures JSON (used when store=fixtures)",
    )
    parser.add_argument(
        "--db-path",
        default=os.getenv("CLIQUE_DB_PATH", "clique.db"),
        help="Path to SQLite database (used when store=sqlite)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    points = commands.add_parser("points", help="Compute points per user pair and period")
    points.add_argument(
        "--period",
        required=True,
        help="Period to aggregate over: " + ", ".join(g.value for g in Granularity),
    )
    points.add_argument("--guild", default=None, help="Only use messages from this guild")
    points.add_argument("--after", default=None, help="Only use messages sent after this time")
    points.add_argument("--before", default=None, help="Only use messages sent before this time")
    points.add_argument(
        "--output",
        choices=["json", "pretty"],
        default="pretty",
        help="Output format (default: pretty)",
    )

    ingest = commands.add_parser("ingest", help="Load a JSON message fixture into SQLite")
    ingest.add_argument("fixture", help="Path to fixtures JSON")

    return parser


def _open_store(args: argparse.Namespace) -> MessageStore:
    if args.store == "sqlite":
        from .io.stores.sqlite import SqliteMessageStore

        return SqliteMessageStore(args.db_path)
    return FixtureMessageStore(args.fixture_path)


def _print_pretty(
    aggregates: List[PeriodAggregate],
    resolve_name: Optional[Callable[[int], Optional[str]]] = None,
) -> None:
    def label(user_id: int) -> str:
        name = resolve_name(user_id) if resolve_name else None
        return f"{user_id} ({name})" if name else str(user_id)

    print(f"\n{'='*60}")
    print(f"Clique Points: {len(aggregates)} periods")
    print(f"{'='*60}\n")

    for agg in aggregates:
        print(f"During the period beginning {agg.period.isoformat()}:")
        for row in agg.data:
            print(f"  User {label(row.user_1)} and user {label(row.user_2)} "
                  f"spoke {row.points} times")
    print(f"{'='*60}\n")


def _run_points(args: argparse.Namespace) -> int:
    # Parameters are validated before the store is opened
    query = PointsQuery.from_params(
        args.period, guild=args.guild, after=args.after, before=args.before
    )
    store = _open_store(args)
    try:
        aggregates = PointsEngine(store).run(query)

        if args.output == "json":
            print(serialize_aggregates(aggregates, indent=2))
        else:
            _print_pretty(aggregates, getattr(store, "get_user", None))
    finally:
        if hasattr(store, "close"):
            store.close()
    return EXIT_OK


def _run_ingest(args: argparse.Namespace) -> int:
    from .io.stores.sqlite import SqliteMessageStore

    messages = FixtureMessageStore(args.fixture).fetch_messages()
    with SqliteMessageStore(args.db_path) as store:
        count = store.insert_messages(messages)
    print(f"ingested: {count}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    args = _build_parser().parse_args(argv)

    try:
        if args.command == "ingest":
            return _run_ingest(args)
        return _run_points(args)
    except InvalidParameterError as e:
        print(ErrorBody.from_exception(e).model_dump_json(), file=sys.stderr)
        return EXIT_INVALID_PARAMETER
    except (CliqueError, ValueError) as e:
        print(ErrorBody.from_exception(e).model_dump_json(), file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
