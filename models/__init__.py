from models.room import Room
from models.booking import BookingFailure, BookingResult
from models.audit import BookingLogEntry
