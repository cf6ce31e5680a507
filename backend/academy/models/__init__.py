from .enums import RegistrationStatus, UserRole
from .user import User
from .venue import Venue
from .venue_time_slot import VenueTimeSlot
from .venue_slot_day import VenueSlotDay
from .coach import Coach
from .player import Player
from .attendance import Attendance
from .registration import Registration
from .training_session import TrainingSession

__all__ = [
    "RegistrationStatus",
    "UserRole",
    "User",
    "Venue",
    "VenueTimeSlot",
    "VenueSlotDay",
    "Coach",
    "Player",
    "Attendance",
    "Registration",
    "TrainingSession",
]
