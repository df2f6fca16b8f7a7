"""Match service for normalization and filtering of API responses"""
from typing import Any, Dict, List, Optional, Sequence, Tuple, TypeVar, Union

from pydantic import ValidationError

from ..errors import DeserializationError
from ..models.records import MatchRecord, ScheduleRecord
from ..models.schemas import (
    MatchEntry,
    MatchListResponse,
    ScheduleMatchInfo,
    ScheduleResponse,
)
from ..utils.logger import setup_logger

logger = setup_logger(__name__)

ScheduleItem = Tuple[ScheduleRecord, str]
Filterable = TypeVar("Filterable", MatchRecord, ScheduleItem)


def _join_path(prefix: str, loc: Sequence[Union[str, int]]) -> str:
    """Build a dotted field path such as 'typeMatches[0].seriesMatches[1]'"""
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or "<root>"


def _match_id_of(entry: Any, info_key: Optional[str] = "matchInfo") -> Optional[int]:
    """Best-effort match id for error messages"""
    if not isinstance(entry, dict):
        return None
    info = entry.get(info_key) if info_key else entry
    if isinstance(info, dict):
        match_id = info.get("matchId")
        if isinstance(match_id, bool):
            return None
        if isinstance(match_id, int):
            return match_id
        # Numeric strings are coerced by validation, so report them as ids too
        if isinstance(match_id, str) and match_id.strip().isdecimal():
            return int(match_id)
    return None


def _validate(model: type, data: Any, prefix: str, match_id: Optional[int] = None):
    """Validate data against a schema, raising DeserializationError on failure"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        raise DeserializationError(
            path=_join_path(prefix, first["loc"]),
            message=first["msg"],
            match_id=match_id
        ) from e


class MatchService:
    """Service for flattening API responses into match records"""

    def __init__(self, skip_malformed: bool = False):
        """
        Initialize match service

        Args:
            skip_malformed: Log and skip malformed matches instead of
                failing the whole listing
        """
        self.skip_malformed = skip_malformed

    def normalize_matches(self, raw_json: Dict[str, Any]) -> List[MatchRecord]:
        """
        Flatten a live/recent/upcoming response into match records

        Type groups, series groups and matches are visited in document
        order. Series groups without a series wrapper (advertisements)
        contribute nothing.

        Args:
            raw_json: Decoded JSON document

        Returns:
            Match records in document order

        Raises:
            DeserializationError: If a required field is missing or malformed
        """
        response = _validate(MatchListResponse, raw_json, "")
        records = []

        for type_index, type_match in enumerate(response.type_matches):
            for series_index, series_match in enumerate(type_match.series_matches):
                wrapper = series_match.series_ad_wrapper
                if wrapper is None:
                    continue

                prefix = (
                    f"typeMatches[{type_index}].seriesMatches[{series_index}]"
                    f".seriesAdWrapper.matches"
                )
                for match_index, entry in enumerate(wrapper.matches):
                    record = self._parse_entry(
                        MatchEntry, entry, f"{prefix}[{match_index}]", _match_id_of(entry)
                    )
                    if record is not None:
                        records.append(record)

        logger.info(f"Normalized {len(records)} matches")
        return records

    def normalize_schedule(self, raw_json: Dict[str, Any]) -> List[ScheduleItem]:
        """
        Flatten a schedule response into (record, series name) pairs

        Date buckets holding advertisement details instead of a schedule
        wrapper contribute nothing.

        Args:
            raw_json: Decoded JSON document

        Returns:
            Pairs of schedule record and owning series name, in document order

        Raises:
            DeserializationError: If a required field is missing or malformed
        """
        response = _validate(ScheduleResponse, raw_json, "")
        items = []

        for bucket_index, bucket in enumerate(response.match_schedule_map):
            wrapper = bucket.schedule_ad_wrapper
            if wrapper is None:
                continue

            for series_index, series in enumerate(wrapper.match_schedule_list):
                prefix = (
                    f"matchScheduleMap[{bucket_index}].scheduleAdWrapper"
                    f".matchScheduleList[{series_index}].matchInfo"
                )
                for match_index, entry in enumerate(series.match_info):
                    record = self._parse_entry(
                        ScheduleMatchInfo, entry, f"{prefix}[{match_index}]",
                        _match_id_of(entry, info_key=None)
                    )
                    if record is not None:
                        items.append((record, series.series_name))

        logger.info(f"Normalized {len(items)} scheduled matches")
        return items

    def _parse_entry(self, model: type, entry: Any, path: str, match_id: Optional[int]):
        """Validate one match and convert it, honouring the malformed-record policy"""
        try:
            return _validate(model, entry, path, match_id).to_record()
        except DeserializationError as e:
            if not self.skip_malformed:
                raise
            logger.warning(f"Skipping malformed match: {e}")
            return None

    def filter_by_series(
        self,
        items: Sequence[Filterable],
        query: Optional[str]
    ) -> List[Filterable]:
        """
        Keep items whose series name contains the query (case-insensitive)

        Args:
            items: Match records or (schedule record, series name) pairs
            query: Series name fragment, e.g. 'Indian Premier League'

        Returns:
            Matching items in their original relative order
        """
        if not query:
            return list(items)

        needle = query.strip().lower()
        filtered = [item for item in items if needle in _series_name_of(item).lower()]

        logger.info(f"Filtered to {len(filtered)} of {len(items)} matches for series '{query}'")
        return filtered


def _series_name_of(item: Union[MatchRecord, ScheduleItem]) -> str:
    if isinstance(item, tuple):
        return item[1]
    return item.series_name


def normalize_matches(raw_json: Dict[str, Any], skip_malformed: bool = False) -> List[MatchRecord]:
    """Flatten a match listing response; see MatchService.normalize_matches"""
    return MatchService(skip_malformed).normalize_matches(raw_json)


def normalize_schedule(raw_json: Dict[str, Any], skip_malformed: bool = False) -> List[ScheduleItem]:
    """Flatten a schedule response; see MatchService.normalize_schedule"""
    return MatchService(skip_malformed).normalize_schedule(raw_json)


def filter_by_series(items: Sequence[Filterable], query: Optional[str]) -> List[Filterable]:
    """Filter by series name substring; see MatchService.filter_by_series"""
    return MatchService().filter_by_series(items, query)
