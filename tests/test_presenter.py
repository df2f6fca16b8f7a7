from datetime import datetime

from cricket_scores.models.records import (
    Innings,
    MatchRecord,
    MatchScore,
    ScheduleRecord,
    Team,
    TeamScore,
    Venue,
)
from cricket_scores.services.match_service import normalize_matches
from cricket_scores.services.presenter import (
    NO_MATCHES,
    NO_SCORE,
    NOT_STARTED,
    format_matches,
    format_schedule,
    score_text,
)

from conftest import listing, match_info, series_group

MI = Team(62, "Mumbai Indians", "MI", 225645)
CSK = Team(58, "Chennai Super Kings", "CSK", 225641)
WANKHEDE = Venue("Wankhede Stadium", "Mumbai", "+05:30", id=81)


def make_record(score=None, status="Live", **overrides):
    fields = dict(
        id=1,
        series_id=9237,
        series_name="Indian Premier League 2026",
        description="1st Match",
        format="T20",
        team1=MI,
        team2=CSK,
        venue=WANKHEDE,
        start_date="1776000000000",
        end_date="1776012600000",
        state="In Progress",
        status=status,
        score=score,
    )
    fields.update(overrides)
    return MatchRecord(**fields)


def test_score_text_both_teams_team1_first():
    score = MatchScore(
        team1=TeamScore(Innings(182, 6, 20.0)),
        team2=TeamScore(Innings(140, 4, 15.3)),
    )

    assert score_text(make_record(score)) == "MI: 182/6 (20)\nCSK: 140/4 (15.3)"


def test_score_text_single_team():
    only_second = MatchScore(team1=TeamScore(None), team2=TeamScore(Innings(12, 0, 1.4)))

    assert score_text(make_record(only_second)) == "CSK: 12/0 (1.4)"


def test_score_placeholders_are_distinct():
    not_started = score_text(make_record(None))
    no_innings = score_text(make_record(MatchScore()))

    assert not_started == NOT_STARTED == "Match not started"
    assert no_innings == NO_SCORE == "No score available"
    assert not_started != no_innings


def test_format_matches_empty():
    assert format_matches([]) == NO_MATCHES == "No matches found"


def test_format_matches_table_layout():
    output = format_matches([make_record(MatchScore(team1=TeamScore(Innings(50, 1, 6.0))))])
    lines = output.split("\n")

    assert output.startswith("\n┌")
    assert output.endswith("┘\n")
    header_cells = lines[2].split("│")[1:-1]
    assert [cell.strip() for cell in header_cells] == ["Teams", "Venue", "Status", "Score"]
    # widest content per column plus one space of padding on each side
    assert [len(cell) for cell in header_cells] == [39, 26, 8, 14]
    assert "Mumbai Indians vs Chennai Super Kings" in lines[4]
    assert "Wankhede Stadium, Mumbai" in lines[4]
    assert "MI: 50/1 (6)" in lines[4]


def test_missing_status_uses_fallback():
    output = format_matches([make_record(None, status=None)])

    assert "Upcoming" in output
    assert NOT_STARTED in output


def test_two_match_scenario(two_match_listing):
    records = normalize_matches(two_match_listing)
    output = format_matches(records)
    lines = output.strip("\n").split("\n")

    # top, header, rule, 2 lines for the scored match, rule, 1 line, bottom
    assert len(lines) == 8
    assert "MI: 182/6 (20)" in lines[3]
    assert "CSK: 140/4 (15.3)" in lines[4]
    assert lines[5].startswith("├")
    assert "Match not started" in lines[6]
    assert "Upcoming" in lines[6]


def test_required_fields_only_renders_fallbacks():
    info = match_info(7)
    for optional in ("state", "status", "startDate", "endDate"):
        del info[optional]

    output = format_matches(normalize_matches(listing(series_group("Ranji Trophy", {"matchInfo": info}))))

    assert "Upcoming" in output
    assert "Match not started" in output


def make_schedule(start_date):
    return ScheduleRecord(
        id=5,
        series_id=8786,
        description="1st Test",
        format="TEST",
        team1=Team(2, "India", "IND"),
        team2=Team(9, "England", "ENG"),
        venue=Venue("Eden Gardens", "Kolkata", "+05:30"),
        start_date=start_date,
    )


def test_format_schedule_renders_local_time_in_zone():
    # 2026-04-12 13:20 UTC
    output = format_schedule([(make_schedule("1776000000000"), "India tour")], tz="Asia/Kolkata")

    assert "India vs England" in output
    assert "Kolkata" in output
    assert "Eden Gardens" not in output
    assert "2026-04-12 06:50 PM" in output


def test_format_schedule_bad_start_date_falls_back_to_epoch():
    expected = datetime.fromtimestamp(0).strftime("%Y-%m-%d %I:%M %p")

    for bad in ("TBC", "", None):
        output = format_schedule([(make_schedule(bad), "India tour")])
        assert expected in output


def test_format_schedule_empty():
    assert format_schedule([]) == NO_MATCHES
