"""Shared errkit constants.

Delimiter markers must match byte-for-byte the conventions other components
use when joining errors into plain text. Kind identifiers are the stable
machine-readable names emitted in rendered and serialized errors.
"""

# Delimiters
DELIM_ARROW = "<-"
DELIM_ARROW_SERIALIZED = "\\u003c-"
DELIM_SEMICOLON = "; "
DELIM_MULTILINE = "\n -  "
MULTILINE_ERR_PREFIX = "the following errors occurred:"

# Rendering
KIND_PREFIX = "errKind="

# Built-in kinds
KIND_UNKNOWN = "unknown-error"
KIND_NETWORK = "network-error"
KIND_NETWORK_PERMANENT = "network-permanent-error"
KIND_NETWORK_TEMPORARY = "network-temporary-error"
KIND_DEADLINE = "deadline-error"

# Decomposition
MAX_UNWRAP_NESTING = 64
