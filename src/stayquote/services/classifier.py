"""Season and bracket classification for pricing lookups."""

import datetime as dt

from stayquote.models import GroupBracket, SeasonBucket, StayBracket

HIGH_SEASON_MONTHS = {6, 7, 8, 12}
MEDIUM_SEASON_MONTHS = {4, 5, 9}


def classify_season(date: dt.date) -> SeasonBucket:
    """Map a calendar date to its season.

    Peak runs from December 20th through January 7th. High season is June
    through August plus the rest of December, medium is April, May and
    September, and everything else is low.
    """
    if (date.month == 12 and date.day >= 20) or (date.month == 1 and date.day <= 7):
        return SeasonBucket.PEAK
    if date.month in HIGH_SEASON_MONTHS:
        return SeasonBucket.HIGH
    if date.month in MEDIUM_SEASON_MONTHS:
        return SeasonBucket.MEDIUM
    return SeasonBucket.LOW


def classify_group(guests: int) -> GroupBracket:
    """Map a guest count (>= 1) to its group bracket."""
    if guests <= 1:
        return GroupBracket.ONE
    if guests == 2:
        return GroupBracket.TWO
    if guests <= 4:
        return GroupBracket.THREE_TO_FOUR
    if guests <= 6:
        return GroupBracket.FIVE_TO_SIX
    if guests <= 8:
        return GroupBracket.SEVEN_TO_EIGHT
    return GroupBracket.NINE_PLUS


def classify_stay(nights: int) -> StayBracket:
    """Map a night count (>= 1) to its stay bracket."""
    if nights <= 1:
        return StayBracket.ONE
    if nights == 2:
        return StayBracket.TWO
    if nights <= 5:
        return StayBracket.THREE_TO_FIVE
    if nights <= 7:
        return StayBracket.SIX_TO_SEVEN
    if nights <= 14:
        return StayBracket.EIGHT_TO_FOURTEEN
    return StayBracket.FIFTEEN_PLUS
