"""
Domain models for the coffee shop service.

All records use Pydantic v2 BaseModel for automatic validation. Nothing here
crosses a wire: the models exist so that journal entries, recipes and service
outcomes are typed, validated values instead of loose strings.

Enums inherit from (str, Enum) so they compare and print as plain strings
(e.g. "latte" instead of DrinkKind.LATTE).
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

# Closing rule of every journal block.
ENTRY_SEPARATOR = "-------------------------------"


class DrinkKind(str, Enum):
    """The closed set of drinks the barista knows how to make."""

    LATTE = "latte"
    CAPPUCCINO = "cappuccino"
    FLAT_WHITE = "flat_white"


class ServiceStatus(str, Enum):
    """Outcome of one facade call."""

    COMPLETED = "COMPLETED"                  # A drink was made, tables cleaned
    UNKNOWN_SELECTION = "UNKNOWN_SELECTION"  # No drink made, tables still cleaned


# ── Journal ──────────────────────────────────────────────────────────


class LogEntry(BaseModel):
    """One journal record: a free-form message plus its capture time.

    Entries are written once and never read back or changed, so the model is
    frozen.
    """

    model_config = {"frozen": True}

    message: str
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def long_time(self) -> str:
        return self.timestamp.strftime("%H:%M:%S")

    @property
    def long_date(self) -> str:
        # No zero padding on the day: "Monday, October 5, 2026".
        ts = self.timestamp
        return f"{ts:%A}, {ts:%B} {ts.day}, {ts.year}"

    def render(self) -> str:
        """Return the exact text block appended to the journal sink."""
        return (
            f"\r\nLog Entry : {self.long_time} {self.long_date}\n"
            "  :\n"
            f"  :{self.message}\n"
            f"{ENTRY_SEPARATOR}\n"
        )


# ── Facade output ────────────────────────────────────────────────────


class ServiceResult(BaseModel):
    """What the facade reports back to its caller after a full service.

    `drink` is None when the selection code did not match any recipe; the
    tables are cleaned either way.
    """

    barista: str = Field(..., min_length=1)
    selection: str                      # Raw token as typed by the customer
    drink: DrinkKind | None = None
    status: ServiceStatus
