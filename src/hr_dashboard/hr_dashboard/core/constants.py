"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BRADFORD_THRESHOLD_LOW = 50
BRADFORD_THRESHOLD_MEDIUM = 125
BRADFORD_THRESHOLD_HIGH = 200
BRADFORD_THRESHOLD_CRITICAL = 400

DEFAULT_ROLLING_MONTHS = 12
DEFAULT_SHIFT = "09:00-17:00"
DEFAULT_BREAK_MINUTES = 0

POSITION_RANKS = {
    "Super Admin": 100,
    "Senior Team Lead": 80,
    "Operations Manager": 70,
    "Team Lead": 60,
    "Assistant Team Lead": 40,
    "QA Specialist": 30,
    "Medical Biller": 20,
    "Medical Coder": 20,
}
