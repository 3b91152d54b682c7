"""Constants for the Gemini API adapter."""

GEMINI_API_NAME = "gemini_api"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_DEFAULT_MODEL = "gemini-3-flash-preview"

# Shown to the user for every resolver failure; details go to the log only
RESOLUTION_FAILED_MESSAGE = "Failed to fetch bus stop data. Please check the ID."
MISSING_API_KEY_MESSAGE = "Gemini API key is not configured. Set GEMINI_API_KEY."

UNKNOWN_STOP_NAME = "Unknown Stop"
UNKNOWN_CITY = "Unknown City"

STOP_PROMPT_TEMPLATE = (
    'Find the exact GPS coordinates (latitude, longitude) and the official name for the '
    'South Korean bus stop with ID "{stop_id}". \n'
    "Provide the information in JSON format with the following keys: "
    "name, latitude, longitude, city. \n"
    "If the ID is partially incomplete or standard (like 5 digits), find the most likely match."
)
