import copy

import pytest


def team(team_id, name, short_name, image_id=None):
    data = {"teamId": team_id, "teamName": name, "teamSName": short_name}
    if image_id is not None:
        data["imageId"] = image_id
    return data


def venue(ground="Wankhede Stadium", city="Mumbai", timezone="+05:30", venue_id=None):
    data = {"ground": ground, "city": city, "timezone": timezone}
    if venue_id is not None:
        data["id"] = venue_id
    return data


def match_info(match_id, series_name="Indian Premier League 2026", **overrides):
    info = {
        "matchId": match_id,
        "seriesId": 9237,
        "seriesName": series_name,
        "matchDesc": f"{match_id}th Match",
        "matchFormat": "T20",
        "startDate": "1776000000000",
        "endDate": "1776012600000",
        "state": "In Progress",
        "status": "Mumbai Indians opt to bowl",
        "team1": team(62, "Mumbai Indians", "MI", image_id=225645),
        "team2": team(58, "Chennai Super Kings", "CSK", image_id=225641),
        "venueInfo": venue(venue_id=81),
    }
    info.update(overrides)
    return info


def innings(runs, wickets=None, overs=20.0, innings_id=1):
    data = {"inningsId": innings_id, "runs": runs, "overs": overs}
    if wickets is not None:
        data["wickets"] = wickets
    return data


def full_score():
    return {
        "team1Score": {"inngs1": innings(182, 6, 20.0)},
        "team2Score": {"inngs1": innings(140, 4, 15.3, innings_id=2)},
    }


def listing(*series_groups):
    """Build a match listing document with one type group"""
    return {"typeMatches": [{"matchType": "League", "seriesMatches": list(series_groups)}]}


def series_group(series_name, *matches):
    return {
        "seriesAdWrapper": {
            "seriesId": 9237,
            "seriesName": series_name,
            "matches": list(matches),
        }
    }


AD_GROUP = {"adDetail": {"name": "native_matches", "layout": "native_large", "position": 2}}


def schedule_info(match_id, start_date="1776000000000", **overrides):
    info = {
        "matchId": match_id,
        "seriesId": 8786,
        "matchDesc": "1st Test",
        "matchFormat": "TEST",
        "startDate": start_date,
        "endDate": "1776400000000",
        "team1": team(2, "India", "IND", image_id=172115),
        "team2": team(9, "England", "ENG", image_id=172123),
        "venueInfo": venue("Eden Gardens", "Kolkata", "+05:30", venue_id=31),
    }
    info.update(overrides)
    return info


def schedule_document(*buckets):
    return {"matchScheduleMap": list(buckets)}


def schedule_bucket(*series):
    return {
        "scheduleAdWrapper": {
            "date": "SAT, 18 APR 2026",
            "longDate": "1776470400000",
            "matchScheduleList": list(series),
        }
    }


def series_schedule(series_name, *infos):
    return {"seriesName": series_name, "seriesId": 8786, "matchInfo": list(infos)}


@pytest.fixture
def two_match_listing():
    """One series wrapper: a match with full scores and one not yet started"""
    scored = {"matchInfo": match_info(101), "matchScore": full_score()}
    not_started = {"matchInfo": match_info(102, status=None, state="Preview")}
    return copy.deepcopy(listing(series_group("Indian Premier League 2026", scored, not_started)))
