"""Achievement news domain configuration."""

# Prefixed to the search terms so YouTube favours full playthrough videos
LONGPLAY_QUALIFIER = "longplay"
LONGPLAY_MAX_RESULTS = 1

# Literal tokens left in the post for the author to fill in
AUTHOR_PLACEHOLDER = "{AUTHOR_NAME}"
LONGPLAY_PLACEHOLDER = "{LONGPLAY-LINK}"

# Command throttling: uses per period (seconds), per user
THROTTLE_USES = 3
THROTTLE_PERIOD = 60.0

COMMAND_NAME = "genachnews"
COMMAND_ALIASES = ["gan"]
COMMAND_DESCRIPTION = "Generate an achievement-news post template for the given game ID"
COMMAND_EXAMPLE = "`genachnews 4650`"
