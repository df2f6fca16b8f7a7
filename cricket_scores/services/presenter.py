"""Presenter for turning match records into text tables"""
from typing import Optional, Sequence, Tuple

from ..models.records import MatchRecord, MatchScore, ScheduleRecord, Team, TeamScore
from ..utils.table import render_table
from ..utils.timezone import format_local_time

NO_MATCHES = "No matches found"
NO_SCORE = "No score available"
NOT_STARTED = "Match not started"
STATUS_FALLBACK = "Upcoming"

MATCH_HEADERS = ("Teams", "Venue", "Status", "Score")
SCHEDULE_HEADERS = ("Teams", "Venue", "Schedule")


def _format_overs(overs: float) -> str:
    """19.0 -> '19', 19.4 -> '19.4'"""
    return f"{overs:g}"


def _score_line(team: Team, team_score: Optional[TeamScore]) -> Optional[str]:
    if team_score is None or team_score.innings1 is None:
        return None
    innings = team_score.innings1
    return f"{team.short_name}: {innings.runs}/{innings.wickets} ({_format_overs(innings.overs)})"


def score_text(record: MatchRecord) -> str:
    """
    Combined score line for a match

    Team 1 comes first when both teams have batted. A score structure with
    no innings data and a missing score structure have distinct
    placeholders.
    """
    score: Optional[MatchScore] = record.score
    if score is None:
        return NOT_STARTED

    lines = [
        line for line in (
            _score_line(record.team1, score.team1),
            _score_line(record.team2, score.team2),
        )
        if line is not None
    ]
    if not lines:
        return NO_SCORE
    return "\n".join(lines)


def teams_text(team1: Team, team2: Team) -> str:
    # Full names in every rendering; short names only appear in score lines
    return f"{team1.name} vs {team2.name}"


def status_text(record: MatchRecord) -> str:
    return record.status or STATUS_FALLBACK


def format_matches(records: Sequence[MatchRecord]) -> str:
    """
    Render live, recent or upcoming matches as a table

    Args:
        records: Match records in display order

    Returns:
        Table text surrounded by blank lines, or a placeholder message
        when there are no records
    """
    if not records:
        return NO_MATCHES

    rows = [
        (
            teams_text(record.team1, record.team2),
            f"{record.venue.ground}, {record.venue.city}",
            status_text(record),
            score_text(record),
        )
        for record in records
    ]
    return f"\n{render_table(MATCH_HEADERS, rows)}\n"


def format_schedule(items: Sequence[Tuple[ScheduleRecord, str]], tz: Optional[str] = None) -> str:
    """
    Render scheduled matches as a table

    Start times are shown in the local timezone, or in tz when given.
    Unparseable start dates show the epoch instead of failing the listing.
    """
    if not items:
        return NO_MATCHES

    rows = [
        (
            teams_text(record.team1, record.team2),
            record.venue.city,
            format_local_time(record.start_date, tz),
        )
        for record, _series_name in items
    ]
    return f"\n{render_table(SCHEDULE_HEADERS, rows)}\n"
