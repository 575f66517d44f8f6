"""Domain constants shared by deterministic logic."""

EARTH_RADIUS_KM = 6371.0
MAX_PLANNING_DISTANCE_KM = 50.0

SAME_ENDPOINTS_MESSAGE = "Origin and destination cannot be the same."
DISTANCE_TOO_LARGE_MESSAGE = "Distance too large for multimodal planning (max 50km)."

TIMEOUT_MESSAGE = "Connection timeout. Please try again."
NETWORK_UNAVAILABLE_MESSAGE = "Cannot connect to server. Is the API running?"
NOT_FOUND_MESSAGE = "Route not found."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."
UNKNOWN_SERVER_MESSAGE = "Unknown error"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."
