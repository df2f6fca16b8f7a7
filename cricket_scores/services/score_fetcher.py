"""Score fetcher tying the API client, normalizer and presenter together"""
from typing import List, Optional, Sequence

from ..models.records import MatchRecord
from ..utils.logger import setup_logger
from .cricbuzz_client import CricbuzzClient
from .match_service import MatchService, ScheduleItem
from .presenter import format_matches, format_schedule

logger = setup_logger(__name__)

LIVE_ENDPOINT = "matches/v1/live"
RECENT_ENDPOINT = "matches/v1/recent"
UPCOMING_ENDPOINT = "matches/v1/upcoming"
SCHEDULE_ENDPOINT = "schedule/v1/{kind}"

SCHEDULE_KINDS = ("international", "league", "domestic", "women")


class ScoreFetcher:
    """Lists and renders matches for each Cricbuzz listing"""

    def __init__(
        self,
        client: CricbuzzClient,
        match_service: Optional[MatchService] = None,
        timezone: Optional[str] = None
    ):
        """
        Initialize score fetcher

        Args:
            client: API client used for every request
            match_service: Normalizer (defaults to one that aborts on malformed matches)
            timezone: Timezone for schedule times; local time when None
        """
        self.client = client
        self.match_service = match_service or MatchService()
        self.timezone = timezone

    def list_live(self) -> List[MatchRecord]:
        return self._list_matches(LIVE_ENDPOINT)

    def list_recent(self) -> List[MatchRecord]:
        return self._list_matches(RECENT_ENDPOINT)

    def list_upcoming(self) -> List[MatchRecord]:
        return self._list_matches(UPCOMING_ENDPOINT)

    def list_schedule(self, kind: str = "international") -> List[ScheduleItem]:
        """
        List scheduled matches

        Args:
            kind: One of SCHEDULE_KINDS

        Returns:
            (schedule record, series name) pairs
        """
        if kind not in SCHEDULE_KINDS:
            raise ValueError(f"Unknown schedule kind {kind!r}, expected one of {', '.join(SCHEDULE_KINDS)}")

        raw = self.client.fetch_json(SCHEDULE_ENDPOINT.format(kind=kind))
        items = self.match_service.normalize_schedule(raw)
        logger.info(f"Fetched {len(items)} scheduled {kind} matches")
        return items

    def _list_matches(self, endpoint: str) -> List[MatchRecord]:
        raw = self.client.fetch_json(endpoint)
        records = self.match_service.normalize_matches(raw)
        logger.info(f"Fetched {len(records)} matches from {endpoint}")
        return records

    def render(self, records: Sequence[MatchRecord]) -> str:
        return format_matches(records)

    def render_schedule(self, items: Sequence[ScheduleItem]) -> str:
        return format_schedule(items, self.timezone)
