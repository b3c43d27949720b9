"""Domain constants."""

TBD_PLACE_NAME = "TBD"
TBD_FULL_ID = "tbd-full"
TBD_ID_PREFIX = "tbd-"

MAX_PLACE_NAME_LENGTH = 200
MAX_NOTES_LENGTH = 4000
