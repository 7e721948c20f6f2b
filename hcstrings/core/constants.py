"""
Constants
Centralised storage for placeholder syntax, slug limits and output naming.
"""
PLACEHOLDER_FORMAT = "{{{{t '{key}'}}}}"
SLUG_MAX_LENGTH = 64
MAPPING_INDENT = 2
DEFAULT_LANG = "es"
TEMPLATE_EXTENSION = "hbs"
MAPPING_EXTENSION = "json"

# Invalid evidence pattern policies
ABORT = "abort"
SKIP = "skip"
INVALID_PATTERN_POLICIES = (ABORT, SKIP)
