from __future__ import annotations

QUOTE_CHAR = '"'

CONFIG_EXT_TO_FORMAT = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}

ANSWER_PROMPT = "{label}: "
NOT_FOUND_PROMPT = '"{path}" not found; drop file here: '
SOURCE_RETRY_PROMPT = "{error}; drop file here: "
COPY_PROMPT = "drop file here: "
RETRY_ALERT = "{error}; press enter to retry"
DIR_CREATED_ALERT = "dir '{path}' not found; created, press enter to retry"

BAD_TIME_FORMAT = "unrecognized time format"

# Tried in order; the first layout that consumes the whole answer wins.
TIME_LAYOUTS = [
    "%a %b %d %H:%M:%S %Y",  # ANSIC
    "%a %b %d %H:%M:%S %Z %Y",  # UnixDate
    "%a %b %d %H:%M:%S %z %Y",  # RubyDate
    "%d %b %y %H:%M %Z",  # RFC822
    "%d %b %y %H:%M %z",  # RFC822Z
    "%A, %d-%b-%y %H:%M:%S %Z",  # RFC850
    "%a, %d %b %Y %H:%M:%S %Z",  # RFC1123
    "%a, %d %b %Y %H:%M:%S %z",  # RFC1123Z
    "%Y-%m-%dT%H:%M:%S%z",  # RFC3339
    "%Y-%m-%dT%H:%M:%S.%f%z",  # RFC3339 with fraction
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%I:%M%p",  # Kitchen
    "%b %d %H:%M:%S",  # Stamp
    "%b %d %H:%M:%S.%f",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%m/%y",
    "%m/%Y",
    "%m-%y",
    "%m-%Y",
    "%m/%d/%y",
    "%m/%d/%Y",
    "%m-%d-%y",
    "%m-%d-%Y",
]
