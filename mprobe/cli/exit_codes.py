"""Deterministic process exit-code mapping for the CLI."""

SUCCESS = 0
USER_ERROR = 2
EXTERNAL_FAILURE = 4
INTERNAL_BUG = 5
