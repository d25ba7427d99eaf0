"""
Contains the reporting strategies. A strategy is called once for every failed assertion of a chain.
"""
import logging

from frozendict import frozendict

from .errors import ValidationError
from .types import ReportFunction

logger = logging.getLogger(__name__)


def exception_reporting(message: str) -> None:
    """
    Raises a `ValidationError` at the point of failure
    """
    raise ValidationError(message)


def log_reporting(message: str) -> None:
    """
    Writes the message to the `fluentvalidation.reporting` logger. This is the default strategy.
    """
    logger.warning(message)


def alert_reporting(message: str) -> None:
    """
    Shows the message in a platform message box. This needs tkinter and a display; if either is missing the
    error of the underlying toolkit is raised.
    """
    # pylint: disable=import-outside-toplevel
    import tkinter
    from tkinter import messagebox

    root = tkinter.Tk()
    root.withdraw()
    try:
        messagebox.showwarning("Validation failed", message, parent=root)
    finally:
        root.destroy()


DEFAULT_REPORTING: ReportFunction = log_reporting

REPORTING_STRATEGIES: frozendict[str, ReportFunction] = frozendict(
    {
        "throw": exception_reporting,
        "log": log_reporting,
        "alert": alert_reporting,
    }
)


def get_reporting_strategy(name: str) -> ReportFunction:
    """
    Returns the preset strategy registered under `name` (one of "throw", "log", "alert").
    """
    try:
        return REPORTING_STRATEGIES[name]
    except KeyError as error:
        raise KeyError(f"Unknown reporting strategy '{name}', choose one of {sorted(REPORTING_STRATEGIES)}") from error
