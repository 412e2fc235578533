"""Enumeration types for stayquote data models."""

from enum import Enum


class SeasonBucket(str, Enum):
    """Calendar season driving the nightly price multiplier."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    PEAK = "peak"


class GroupBracket(str, Enum):
    """Guest-count bracket used to look up group discounts."""

    ONE = "1"
    TWO = "2"
    THREE_TO_FOUR = "3-4"
    FIVE_TO_SIX = "5-6"
    SEVEN_TO_EIGHT = "7-8"
    NINE_PLUS = "9+"


class StayBracket(str, Enum):
    """Length-of-stay bracket used to look up stay discounts."""

    ONE = "1"
    TWO = "2"
    THREE_TO_FIVE = "3-5"
    SIX_TO_SEVEN = "6-7"
    EIGHT_TO_FOURTEEN = "8-14"
    FIFTEEN_PLUS = "15+"


class BookingKind(str, Enum):
    """What a pricing configuration prices."""

    LODGING = "lodging"
    TOUR = "tour"
