"""In-memory session store.

Sessions live only in process memory and are never persisted; opening a
screen again starts a new one. The oldest sessions are dropped once
`max_sessions` is reached.
"""

from collections import OrderedDict
from typing import Optional

from ..generate import GenerationClient
from .screens import ScreenConfig
from .session import ChatSession


class SessionStore:
    def __init__(self, max_sessions: int = 1000) -> None:
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, ChatSession]" = OrderedDict()

    def create(self, screen: ScreenConfig, generator: GenerationClient) -> ChatSession:
        session = ChatSession(screen=screen, generator=generator)
        self._sessions[session.session_id] = session
        while len(self._sessions) > self.max_sessions:
            self._sessions.popitem(last=False)
        return session

    def get(self, session_id: str) -> Optional[ChatSession]:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def __len__(self) -> int:
        return len(self._sessions)
