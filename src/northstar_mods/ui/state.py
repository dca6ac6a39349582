"""Shared UI state passed from the window to page controllers."""

from dataclasses import dataclass
import logging


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransientError:
    """An error message shown until ``expires_at`` (epoch seconds)."""

    message: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return self.expires_at < now


@dataclass(slots=True)
class UiState:
    """Top-level app state used by controllers and views."""

    is_typing: bool = False
    error_display_seconds: float = 2.0
    transient_error: TransientError | None = None
    banner_title: str = "Northstar Mods"

    def report_error(self, error: BaseException | str, now: float) -> TransientError:
        """Show ``error`` for ``error_display_seconds`` from ``now``."""
        message = str(error)
        logger.error("%s", message)
        self.transient_error = TransientError(message, now + self.error_display_seconds)
        return self.transient_error

    def expire_error(self, now: float) -> bool:
        """Drop the transient error once it has expired. True if one was cleared."""
        if self.transient_error is not None and self.transient_error.is_expired(now):
            self.transient_error = None
            return True
        return False

    @property
    def error_text(self) -> str:
        return "" if self.transient_error is None else self.transient_error.message
