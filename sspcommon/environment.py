"""Settings read from the process environment."""

import os

OPERATOR_VERSION_KEY = "OPERATOR_VERSION"
TEMPLATE_VALIDATOR_IMAGE_KEY = "VALIDATOR_IMAGE"
DEFAULT_OPERATOR_VERSION = "devel"


def env_or_default(name: str, default: str) -> str:
    """Return the variable's value, or the default when it is unset or empty."""
    return os.environ.get(name) or default


def get_operator_version() -> str:
    """Return the operator version from the environment."""
    return env_or_default(OPERATOR_VERSION_KEY, DEFAULT_OPERATOR_VERSION)