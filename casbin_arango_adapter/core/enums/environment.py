"""Runtime environment types.

Used by Settings to pick environment-specific behaviour, currently the log
renderer (human-readable console vs. JSON).

Environments:
- DEVELOPMENT: Local development, coloured console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Deployed service, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
