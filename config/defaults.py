"""Default configuration constants for the Hotel Room Reservation System."""

# Hotel topology
NUM_STANDARD_FLOORS = 9        # Floors 1-9
ROOMS_PER_STANDARD_FLOOR = 10  # Rooms X01-X10
TOP_FLOOR = 10
ROOMS_ON_TOP_FLOOR = 7         # Rooms 1001-1007

# Travel time weights (minutes)
MINUTES_PER_ROOM = 1   # Horizontal travel, per room-unit along a corridor
MINUTES_PER_FLOOR = 2  # Vertical travel, per floor crossed in the lift

# Booking request bounds
MIN_ROOMS_PER_BOOKING = 1
MAX_ROOMS_PER_BOOKING = 5

# Random occupancy bounds (fraction of total inventory)
RANDOM_OCCUPANCY_MIN_PCT = 0.10
RANDOM_OCCUPANCY_MAX_PCT = 0.50

# Allocation phases
PHASE_SAME_FLOOR = "same_floor"
PHASE_CROSS_FLOOR = "cross_floor"

# Floor availability alert threshold (below this many free rooms = nearly full)
FLOOR_NEARLY_FULL_THRESHOLD = 2

# Grid colours
COLOR_AVAILABLE = "#22C55E"
COLOR_OCCUPIED = "#EF4444"
COLOR_JUST_BOOKED = "#4A90D9"
COLOR_EMPTY_SLOT = "#E2E8F0"
