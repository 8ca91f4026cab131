"""Default configuration constants for the Seat Lottery Platform."""

# Seat scoring: closer to the stage = higher score, premium seats always win
DISTANCE_SCORE_MAX = 100
PREMIUM_BONUS = 1000

# Solo attendees: bonus for seats next to an already-seated solo attendee
SOLO_NEIGHBOR_BONUS_RATIO = 0.2

# Tier 3 hybrid selection: share of picks decided by past score (rest is luck)
DEFAULT_SKILL_WEIGHT = 0.70
MIN_SKILL_WEIGHT = 0.0
MAX_SKILL_WEIGHT = 1.0

# Tiers
TIER_LOCKED = 0
TIER_PRIORITY = 1
TIER_RESCUE = 2
TIER_OPEN = 3

TIER_LABELS = {
    TIER_LOCKED: "Relation (locked)",
    TIER_PRIORITY: "Priority",
    TIER_RESCUE: "Rescue",
    TIER_OPEN: "Open",
}

TIER_COLORS = {
    TIER_LOCKED: "#a855f7",
    TIER_PRIORITY: "#ca8a04",
    TIER_RESCUE: "#22d3ee",
    TIER_OPEN: "#3b82f6",
}

# Seat quality percentile bands: (upper bound exclusive, label)
QUALITY_BANDS = [
    (15, "top"),
    (40, "good"),
    (60, "normal"),
    (85, "back"),
]
QUALITY_FALLBACK = "far"
SEAT_QUALITIES = ["top", "good", "normal", "back", "far"]

QUALITY_LABELS = {
    "top": "Top seat",
    "good": "Good seat",
    "normal": "Standard seat",
    "back": "Back seat",
    "far": "Far back",
}

# Score feedback for the next round (better seat => score goes down)
QUALITY_SCORE_DELTA = {
    "top": -4.0,
    "good": -1.5,
    "normal": 0.0,
    "back": +1.5,
    "far": +4.0,
}
LOSE_SCORE_DELTA = +6.0
MIN_SCORE = 1.0
MAX_SCORE = 10.0
DEFAULT_PAST_SCORE = 5.0

# Customers
CUSTOMER_TAGS = ["invitation", "relation", "fanclub"]
DEFAULT_CUSTOMER_TAG = "fanclub"
TAG_ALIASES = {
    "invitation": ["invitation", "vip", "premium", "gold", "優待券"],
    "relation": ["relation", "関係者"],
    "fanclub": ["fanclub", "regular", "ファンクラブ", "一般"],
}
MIN_GROUP_SIZE = 1
MAX_GROUP_SIZE = 10

# Console defaults
DEFAULT_STAGE_POSITION = (500.0, 50.0)
DEFAULT_EVENT_NAME = "Event"

# Sample data sizes
SAMPLE_INVITATION_RANGE = (30, 50)
SAMPLE_FANCLUB_RANGE = (500, 600)
SAMPLE_BLOCKS = [
    # (block id, origin x, origin y, rows, cols)
    ("A", 200.0, 150.0, 8, 12),
    ("B", 520.0, 150.0, 8, 12),
    ("C", 300.0, 450.0, 10, 16),
]
SAMPLE_SEAT_SPACING = 22.0
SAMPLE_PREMIUM_ROWS = 1
