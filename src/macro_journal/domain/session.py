"""Per-request session context."""

from dataclasses import dataclass
from uuid import UUID

TABS = ("log", "foods", "recipes", "summary")
DEFAULT_TAB = "log"


@dataclass
class SessionContext:
    """Selected user and active dashboard tab for one client session."""

    user_id: UUID | None = None
    active_tab: str = DEFAULT_TAB

    def __post_init__(self) -> None:
        self.set_active_tab(self.active_tab)

    def select_user(self, user_id: UUID) -> None:
        """Make user_id the current user."""
        self.user_id = user_id

    def set_active_tab(self, tab: str | None) -> None:
        """Switch tabs, falling back to the daily log for unknown names."""
        self.active_tab = tab if tab in TABS else DEFAULT_TAB

    def clear(self) -> None:
        """Forget the selected user and reset the tab."""
        self.user_id = None
        self.active_tab = DEFAULT_TAB

    @property
    def has_user(self) -> bool:
        return self.user_id is not None
