"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_RECENT_LIMIT = 3

# Office geofence defaults (Mumbai, India) and admin-editable bounds.
DEFAULT_OFFICE_LATITUDE = 19.0760
DEFAULT_OFFICE_LONGITUDE = 72.8777
DEFAULT_CLOCK_IN_RADIUS = 500
MIN_CLOCK_IN_RADIUS = 50
MAX_CLOCK_IN_RADIUS = 5000

EARTH_RADIUS_METERS = 6378137

DEFAULT_ADMIN_NAME = "Admin"
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_ADMIN_AVATAR = "https://placehold.co/100x100.png"
EMPLOYEE_AVATAR_TEMPLATE = "https://placehold.co/40x40.png?text={initial}"

MIN_PASSWORD_LENGTH = 6
