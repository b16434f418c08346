"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200

# Display value for an unknown years-of-service (keeps table cells non-empty).
SERVICE_PLACEHOLDER = " "

MIN_AGE_YEARS = 15
MAX_AGE_YEARS = 100
MIN_ADDRESS_LENGTH = 10
MAX_EMAIL_LENGTH = 100
MAX_TEXT_LENGTH = 500

MAX_SPOUSES = 1
MAX_PARENTS = 2

# Backend messages longer than this are never shown to end users.
MAX_USER_MESSAGE_LENGTH = 150

CSV_HEADERS = (
    "First Name",
    "Last Name",
    "Middle Name",
    "Position",
    "Department",
    "Email",
    "Phone",
    "Messenger Name",
    "FB Link",
    "Employment Status",
    "Hire Date",
    "Resignation Date",
)
