"""
This package enables you to validate a single value with a fluent, chainable API. Failed checks are collected and
reported through a configurable reporting strategy.
"""

from .chain import ValidationChain, validate
from .errors import ValidationError
from .kinds import SubjectKind
from .reporting import (
    REPORTING_STRATEGIES,
    alert_reporting,
    exception_reporting,
    get_reporting_strategy,
    log_reporting,
)
from .types import UNDEFINED
