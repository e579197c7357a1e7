# Chat package: session controller, screen profiles, store and presenter.

from .screens import ScreenConfig, ScreenNotFound, load_screen, list_screens
from .session import ChatSession, SessionState
from .store import SessionStore

__all__ = [
    "ScreenConfig",
    "ScreenNotFound",
    "load_screen",
    "list_screens",
    "ChatSession",
    "SessionState",
    "SessionStore",
]
