"""Application constants."""

# Column limits
BODY_PART_NAME_MAX_LENGTH = 100
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000
NOTES_MAX_LENGTH = 1000

# Sample workout created by the debug endpoint
DEBUG_WORKOUT_USER_ID = 1
DEBUG_WORKOUT_NAME = "Test Full Body Workout"
