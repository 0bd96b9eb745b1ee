"""Deployment environment, read from ``ENVIRONMENT``.

Development gets colored console logs and reveals SMS text in the stub
adapter; every other value logs JSON and keeps message bodies out of logs.
"""

from enum import Enum


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
