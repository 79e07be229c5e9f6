"""Constants for the keycase library."""

import re

__version__ = "0.1.0"

SNAKE_TO_CAMEL_PATTERN = re.compile(r"_([a-zA-Z])")
CAMEL_TO_SNAKE_PATTERN = re.compile(r"[A-Z]")

# Nested containers below the top-level value. Each level costs one stack
# frame, so this stays under the interpreter's default recursion limit of 1000.
DEFAULT_MAX_DEPTH = 768
