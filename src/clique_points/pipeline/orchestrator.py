"""Orchestrator pipeline for points computation."""

import sqlite3
from typing import Any, Iterable, List, Optional

from ..aggregation import aggregate, total_points
from ..core import (
    CliqueError,
    Granularity,
    Message,
    PeriodAggregate,
    PointsQuery,
    StoreUnavailableError,
)
from ..filters import ScopeFilter
from ..interactions import derive_events
from ..io.stores import MessageStore, validate_messages
from ..observability import get_logger
from ..periods import parse_granularity

logger = get_logger(__name__)


def compute_points(
    messages: Iterable[Message],
    granularity: Granularity,
    scope: Optional[ScopeFilter] = None,
) -> List[PeriodAggregate]:
    """
    Run the points pipeline over an in-memory message set.

    Steps: scope filter, reply inference and event derivation, pair
    canonicalization and period bucketing, aggregation.

    Args:
        messages: Messages in any order
        granularity: Period unit
        scope: Optional scope filter (defaults to no restriction)

    Returns:
        PeriodAggregates in ascending period order; periods without any
        interaction are omitted
    """
    period = parse_granularity(granularity)
    scope = scope or ScopeFilter()

    # Step 1: Scope filter, before inference so excluded messages are never predecessors
    scoped = scope.apply(messages)

    # Step 2: Explicit replies plus inferred links, self-links dropped
    events = derive_events(scoped)

    # Step 3: Canonicalize, bucket and count
    aggregates = aggregate(events, period)

    logger.debug(
        "Computed %d periods (%d points) from %d events over %d messages",
        len(aggregates),
        total_points(aggregates),
        len(events),
        len(scoped),
    )
    return aggregates


class PointsEngine:
    """Runs points queries against a message store."""

    def __init__(self, store: MessageStore):
        """
        Initialize the engine.

        Args:
            store: Message store to read snapshots from
        """
        self.store = store

    def run(self, query: PointsQuery) -> List[PeriodAggregate]:
        """
        Run a points query.

        Each call reads one snapshot from the store and holds no state
        afterwards, so concurrent calls need no coordination.

        Args:
            query: Validated query parameters

        Returns:
            PeriodAggregates in ascending period order

        Raises:
            StoreUnavailableError: If the store cannot be read
            InvariantViolationError: If the snapshot breaks message invariants
        """
        snapshot = self._read_snapshot(query)
        validate_messages(snapshot)
        return compute_points(snapshot, query.granularity, ScopeFilter.from_query(query))

    def _read_snapshot(self, query: PointsQuery) -> List[Message]:
        try:
            return list(
                self.store.fetch_messages(
                    guild=query.guild,
                    after=query.after,
                    before=query.before,
                )
            )
        except CliqueError:
            raise
        except (OSError, sqlite3.Error) as e:
            logger.error("Message store read failed: %s", e)
            raise StoreUnavailableError(f"Message store read failed: {e}") from e


def get_points(
    store: MessageStore,
    granularity: Any,
    guild: Any = None,
    after: Any = None,
    before: Any = None,
) -> List[PeriodAggregate]:
    """
    Validate raw parameters and run a points query.

    Parameters are checked before the store is touched.

    Raises:
        InvalidParameterError: If any parameter is rejected
        StoreUnavailableError: If the store cannot be read
    """
    query = PointsQuery.from_params(granularity, guild=guild, after=after, before=before)
    return PointsEngine(store).run(query)
