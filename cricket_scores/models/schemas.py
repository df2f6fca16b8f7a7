"""
Pydantic models for Cricbuzz API responses.

Envelope models keep their match entries raw so that every match
can be validated on its own and a failure can be reported with its
position in the document.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from .records import (
    Innings,
    MatchRecord,
    MatchScore,
    ScheduleRecord,
    Team,
    TeamScore,
    Venue,
)


def _none_as_empty(value: Any) -> Any:
    """The API sends null for some empty lists"""
    return [] if value is None else value


class TeamInfo(BaseModel):
    """Team as sent by the API"""
    team_id: int = Field(..., alias="teamId")
    team_name: str = Field(..., alias="teamName")
    team_s_name: str = Field(..., alias="teamSName")
    image_id: Optional[int] = Field(None, alias="imageId")

    def to_record(self) -> Team:
        return Team(
            id=self.team_id,
            name=self.team_name,
            short_name=self.team_s_name,
            image_id=self.image_id
        )


class VenueInfo(BaseModel):
    """Venue as sent by the API"""
    id: Optional[int] = None
    ground: str
    city: str
    timezone: str
    country: Optional[str] = None

    def to_record(self) -> Venue:
        return Venue(
            ground=self.ground,
            city=self.city,
            timezone=self.timezone,
            id=self.id,
            country=self.country
        )


class InningsInfo(BaseModel):
    """Innings snapshot; the API drops zero-valued keys such as wickets"""
    innings_id: Optional[int] = Field(None, alias="inningsId")
    runs: int = 0
    wickets: int = 0
    overs: float = 0.0

    def to_record(self) -> Innings:
        return Innings(
            runs=self.runs,
            wickets=self.wickets,
            overs=self.overs,
            innings_id=self.innings_id
        )


class TeamScoreInfo(BaseModel):
    innings1: Optional[InningsInfo] = Field(None, alias="inngs1")

    def to_record(self) -> TeamScore:
        return TeamScore(
            innings1=self.innings1.to_record() if self.innings1 else None
        )


class MatchScoreInfo(BaseModel):
    team1_score: Optional[TeamScoreInfo] = Field(None, alias="team1Score")
    team2_score: Optional[TeamScoreInfo] = Field(None, alias="team2Score")

    def to_record(self) -> MatchScore:
        return MatchScore(
            team1=self.team1_score.to_record() if self.team1_score else None,
            team2=self.team2_score.to_record() if self.team2_score else None
        )


class MatchInfo(BaseModel):
    """Match details shared by the listing endpoints"""
    match_id: int = Field(..., alias="matchId")
    series_id: int = Field(..., alias="seriesId")
    series_name: str = Field(..., alias="seriesName")
    match_desc: str = Field(..., alias="matchDesc")
    match_format: str = Field(..., alias="matchFormat")
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    state: Optional[str] = None
    status: Optional[str] = None
    team1: TeamInfo
    team2: TeamInfo
    venue_info: VenueInfo = Field(..., alias="venueInfo")


class MatchEntry(BaseModel):
    """One element of a series wrapper's match list"""
    match_info: MatchInfo = Field(..., alias="matchInfo")
    match_score: Optional[MatchScoreInfo] = Field(None, alias="matchScore")

    def to_record(self) -> MatchRecord:
        info = self.match_info
        return MatchRecord(
            id=info.match_id,
            series_id=info.series_id,
            series_name=info.series_name,
            description=info.match_desc,
            format=info.match_format,
            team1=info.team1.to_record(),
            team2=info.team2.to_record(),
            venue=info.venue_info.to_record(),
            start_date=info.start_date,
            end_date=info.end_date,
            state=info.state,
            status=info.status,
            score=self.match_score.to_record() if self.match_score else None
        )


class SeriesAdWrapper(BaseModel):
    series_id: int = Field(..., alias="seriesId")
    series_name: str = Field(..., alias="seriesName")
    # Entries stay raw so each one is validated, and can be skipped, on its own
    matches: List[Any] = Field(default_factory=list)

    @field_validator("matches", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)


class SeriesMatch(BaseModel):
    # Advertisement slots carry "adDetail" instead of a wrapper
    series_ad_wrapper: Optional[SeriesAdWrapper] = Field(None, alias="seriesAdWrapper")


class TypeMatch(BaseModel):
    match_type: Optional[str] = Field(None, alias="matchType")
    series_matches: List[SeriesMatch] = Field(default_factory=list, alias="seriesMatches")

    @field_validator("series_matches", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)


class MatchListResponse(BaseModel):
    """Response of matches/v1/live, matches/v1/recent and matches/v1/upcoming"""
    type_matches: List[TypeMatch] = Field(default_factory=list, alias="typeMatches")

    @field_validator("type_matches", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)


class ScheduleMatchInfo(BaseModel):
    """Match details in the schedule listing"""
    match_id: int = Field(..., alias="matchId")
    series_id: int = Field(..., alias="seriesId")
    match_desc: str = Field(..., alias="matchDesc")
    match_format: str = Field(..., alias="matchFormat")
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    team1: TeamInfo
    team2: TeamInfo
    venue_info: VenueInfo = Field(..., alias="venueInfo")

    def to_record(self) -> ScheduleRecord:
        return ScheduleRecord(
            id=self.match_id,
            series_id=self.series_id,
            description=self.match_desc,
            format=self.match_format,
            team1=self.team1.to_record(),
            team2=self.team2.to_record(),
            venue=self.venue_info.to_record(),
            start_date=self.start_date,
            end_date=self.end_date
        )


class SeriesSchedule(BaseModel):
    series_name: str = Field(..., alias="seriesName")
    series_id: Optional[int] = Field(None, alias="seriesId")
    match_info: List[Any] = Field(default_factory=list, alias="matchInfo")

    @field_validator("match_info", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)


class ScheduleAdWrapper(BaseModel):
    date: Optional[str] = None
    long_date: Optional[str] = Field(None, alias="longDate")
    match_schedule_list: List[SeriesSchedule] = Field(default_factory=list, alias="matchScheduleList")

    @field_validator("match_schedule_list", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)


class ScheduleBucket(BaseModel):
    schedule_ad_wrapper: Optional[ScheduleAdWrapper] = Field(None, alias="scheduleAdWrapper")


class ScheduleResponse(BaseModel):
    """Response of schedule/v1/<kind>"""
    match_schedule_map: List[ScheduleBucket] = Field(default_factory=list, alias="matchScheduleMap")

    @field_validator("match_schedule_map", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)
