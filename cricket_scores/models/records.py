"""Data models for matches, teams, venues and scores"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Team:
    """One side of a cricket match"""
    id: int
    name: str
    short_name: str
    image_id: Optional[int] = None


@dataclass(frozen=True)
class Venue:
    """Ground a match is played at"""
    ground: str
    city: str
    timezone: str
    id: Optional[int] = None
    country: Optional[str] = None


@dataclass(frozen=True)
class Innings:
    """A team's innings snapshot"""
    runs: int
    wickets: int
    overs: float
    innings_id: Optional[int] = None


@dataclass(frozen=True)
class TeamScore:
    """Score summary for one team"""
    innings1: Optional[Innings] = None


@dataclass(frozen=True)
class MatchScore:
    """Score summary for both teams; either side may be missing"""
    team1: Optional[TeamScore] = None
    team2: Optional[TeamScore] = None


@dataclass(frozen=True)
class MatchRecord:
    """Represents a match from a live, recent or upcoming listing"""
    id: int
    series_id: int
    series_name: str
    description: str
    format: str
    team1: Team
    team2: Team
    venue: Venue
    start_date: Optional[str] = None  # epoch milliseconds, as sent by the API
    end_date: Optional[str] = None
    state: Optional[str] = None
    status: Optional[str] = None
    score: Optional[MatchScore] = None


@dataclass(frozen=True)
class ScheduleRecord:
    """Represents a scheduled match; the series name is carried alongside it"""
    id: int
    series_id: int
    description: str
    format: str
    team1: Team
    team2: Team
    venue: Venue
    start_date: Optional[str] = None
    end_date: Optional[str] = None
