"""Data models for SpaceAce."""

from .campaign import Campaign
from .hex import FractionalHex, HexCoordinate, Point
from .log_entry import LogEntry, LogEntryType
from .mission import Mission, Objective, ObjectiveStatus
from .roll import DieType, Roll, RollMode
from .schemas import RollRequest, ValidationResult
from .sector import Sector, SectorType
from .session import Session

__all__ = [
    "Campaign",
    "DieType",
    "FractionalHex",
    "HexCoordinate",
    "LogEntry",
    "LogEntryType",
    "Mission",
    "Objective",
    "ObjectiveStatus",
    "Point",
    "Roll",
    "RollMode",
    "RollRequest",
    "Sector",
    "SectorType",
    "Session",
    "ValidationResult",
]
