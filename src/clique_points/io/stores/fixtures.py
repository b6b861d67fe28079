"""Fixture message store (offline, deterministic)."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from ...core import GuildID, Message, StoreUnavailableError
from ...filters import ScopeFilter
from ...observability import get_logger
from .base import MessageStore

logger = get_logger(__name__)


class FixtureMessageStore(MessageStore):
    """
    Deterministic store that reads messages from a local JSON fixture file.

    The fixture file is read only when fetch_messages() is called, so every
    call observes the file as it is at that moment.
    """

    def __init__(self, fixture_path: Union[str, Path]):
        self.fixture_path = Path(fixture_path)

    def fetch_messages(
        self,
        guild: Optional[GuildID] = None,
        after: Optional[datetime] = None,
        before: Optional[datetime] = None,
    ) -> List[Message]:
        """
        Load messages from the fixture file and return those in scope.

        Fixture formats supported:
        - list of dicts: [{"id":..., "guild":..., "author":..., "channel":...,
          "reply_to":..., "timestamp": "..."}, ...]
        - dict with a "messages" key holding such a list

        Filtering: exclusive after, exclusive before.
        """
        rows = self._select_rows(self._load_fixture())
        messages = [self._parse_row(i, row) for i, row in enumerate(rows)]
        scope = ScopeFilter(guild=guild, after=after, before=before)
        return scope.apply(messages)

    def _load_fixture(self) -> Any:
        try:
            with self.fixture_path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            logger.error("Fixture file not found: %s", self.fixture_path)
            raise StoreUnavailableError(f"Fixture file not found: {self.fixture_path}") from e
        except json.JSONDecodeError as e:
            logger.error("Fixture file is not valid JSON: %s", self.fixture_path)
            raise StoreUnavailableError(
                f"Fixture file is not valid JSON: {self.fixture_path}"
            ) from e
        except UnicodeDecodeError as e:
            logger.error("Fixture file is not valid UTF-8: %s", self.fixture_path)
            raise StoreUnavailableError(
                f"Fixture file is not valid UTF-8: {self.fixture_path}"
            ) from e

    @staticmethod
    def _select_rows(payload: Any) -> List[Dict[str, Any]]:
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and isinstance(payload.get("messages"), list):
            return payload["messages"]
        raise StoreUnavailableError(
            "Unsupported fixture format; expected a list or {\"messages\": [...]}."
        )

    @staticmethod
    def _parse_row(index: int, row: Any) -> Message:
        if not isinstance(row, dict):
            raise StoreUnavailableError(f"Fixture row {index} is not an object")
        if "timestamp" not in row and "ts" in row:
            row = {**row, "timestamp": row["ts"]}
        try:
            return Message.model_validate(row)
        except ValidationError as e:
            raise StoreUnavailableError(f"Fixture row {index} is not a valid message: {e}") from e
