"""Chat session controller.

A session owns its message list, the draft input and the pending flag, and
moves between two states per request:

    Idle (pending=False) --submit--> Awaiting (pending=True) --result--> Idle

Only one generation request is ever in flight. A submission while one is
outstanding, or with a blank draft, is a silent no-op. State is only mutated
on the event loop; the blocking backend call runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import uuid4

from ..generate import GenerationClient, GenerationRequest, GenerationResult, Message
from .screens import ScreenConfig

logger = logging.getLogger(__name__)

USER = "user"
AI = "ai"


@dataclass(frozen=True)
class SessionState:
    messages: Tuple[Message, ...]
    draft_input: str
    pending: bool


class ChatSession:
    def __init__(self, screen: ScreenConfig, generator: GenerationClient, session_id: Optional[str] = None) -> None:
        self.session_id = session_id or uuid4().hex
        self.screen = screen
        self.generator = generator
        self.draft_input = ""
        self.pending = False
        self._messages: List[Message] = []
        self._task: Optional[asyncio.Task] = None

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def state(self) -> SessionState:
        return SessionState(messages=self.messages, draft_input=self.draft_input, pending=self.pending)

    def set_draft(self, text: str) -> None:
        self.draft_input = text

    def submit(self, draft: Optional[str] = None) -> Optional[asyncio.Task]:
        """Send `draft` (or the stored draft) to the model.

        Returns the dispatched task, or None when the submission was ignored.
        Must be called from a running event loop.
        """
        text = (self.draft_input if draft is None else draft).strip()
        if not text or self.pending:
            return None

        loop = asyncio.get_running_loop()
        self._messages.append(Message(sender=USER, text=text))
        self.pending = True
        self.draft_input = ""

        request = GenerationRequest(
            prompt_text=self.screen.build_prompt(text),
            output_schema=self.screen.schema_def,
        )
        logger.info("Dispatch: session=%s screen=%s structured=%s",
                    self.session_id, self.screen.key, request.output_schema is not None)
        self._task = loop.create_task(self._dispatch(request))
        return self._task

    async def _dispatch(self, request: GenerationRequest) -> None:
        params = self.screen.model_params(self.generator.engine)
        try:
            result = await self.generator.agenerate(request, params)
        except asyncio.CancelledError:
            self.on_result(GenerationResult.failure("cancelled"))
            raise
        except Exception as e:
            # GenerationClient should not raise; keep the session usable if it does
            logger.exception("Generation client raised: session=%s", self.session_id)
            result = GenerationResult.failure(str(e))
        self.on_result(result)

    def on_result(self, result: GenerationResult) -> None:
        """Apply a finished request: append the AI message and return to Idle."""
        if not self.pending:
            logger.warning("Result with no request in flight: session=%s", self.session_id)
            return
        if result.ok:
            text = self._render(result)
        else:
            logger.info("Generation failed: session=%s error=%s", self.session_id, result.error)
            text = self.screen.fallback_text
        self._messages.append(Message(sender=AI, text=text))
        self.pending = False
        logger.debug("Completed: session=%s messages=%d", self.session_id, len(self._messages))

    def _render(self, result: GenerationResult) -> str:
        if result.kind == "structured":
            return self.screen.schema_def.render(result.value)
        return result.value

    async def wait(self) -> None:
        """Wait for the in-flight request, if any."""
        if self._task is not None and not self._task.done():
            await asyncio.shield(self._task)
