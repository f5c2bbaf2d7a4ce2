"""Session state shared by the registry client and the tools."""

from dataclasses import dataclass
from typing import Optional


def normalize_handle(handle: str) -> str:
    """Strip leading '@' characters and surrounding whitespace from a handle."""
    return handle.strip().lstrip("@")


def display_handle(handle: str) -> str:
    """Handle as shown back to the caller, always '@'-prefixed."""
    return f"@{normalize_handle(handle)}"


@dataclass
class Session:
    """
    Registration state for one server process.

    Starts unregistered. A successful registration sets handle, token and
    the registered flag together; nothing resets them afterwards.
    """

    handle: Optional[str] = None
    token: Optional[str] = None
    registered: bool = False

    def establish(self, handle: str, token: str):
        """Record an accepted registration."""
        self.handle = normalize_handle(handle)
        self.token = token
        self.registered = True

    @property
    def display_name(self) -> Optional[str]:
        if self.handle is None:
            return None
        return display_handle(self.handle)

    def to_dict(self) -> dict:
        return {
            "handle": self.handle,
            "token": self.token,
            "registered": self.registered,
        }

    def __repr__(self) -> str:
        # Keep the bearer token out of logs
        status = "registered" if self.registered else "unregistered"
        return f"Session({self.display_name}, {status})"
