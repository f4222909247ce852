"""Constants for enclosplit - default configuration and program metadata."""

# Program metadata
PROGRAM_NAME = "enclosplit"

# Characters treated as whitespace by Segment.is_whitespace_only when the
# splitter config does not override them.
DEFAULT_WHITESPACE = " \t\n"

# Structural error templates: (char, position)
UNOPENED_FMT = "unopened '{char}' at position {position}"
UNCLOSED_FMT = "unclosed '{char}' at position {position}"

# Registry collision templates: (char, index)
EXISTING_START_FMT = "existing start enclosure ('{char}' in enclosures[{index}])"
EXISTING_END_FMT = "existing end enclosure ('{char}' in enclosures[{index}])"

# Placeholder substituted into policy failure messages
POSITION_PLACEHOLDER = "{position}"
