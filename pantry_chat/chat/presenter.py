# Presenter: derives HTML and JSON views from a session's state.
# Message text is always escaped; the small markup produced by the schema
# renderers (**name** lines, --- separators, newlines) is mapped to tags.

from __future__ import annotations
import html
import re
from typing import List

from pydantic import BaseModel

from ..generate import Message
from .screens import ScreenConfig
from .session import ChatSession

STYLESHEET_URL = "/static/chat.css"
SCRIPT_URL = "/static/chat.js"
_BOLD_LINE = re.compile(r"^\*\*(.*)\*\*$")


class MessageView(BaseModel):
    sender: str
    text: str
    html: str


class SessionView(BaseModel):
    session_id: str
    screen: str
    messages: List[MessageView]
    draft_input: str
    pending: bool
    loading_text: str


def render_text(text: str) -> str:
    """Map message text to display markup without trusting any of it."""
    parts = []
    for line in text.split("\n"):
        if line.strip() == "---":
            parts.append("<hr>")
            continue
        m = _BOLD_LINE.match(line)
        if m:
            parts.append(f"<strong>{html.escape(m.group(1))}</strong>")
        else:
            parts.append(html.escape(line))
    return "<br>\n".join(parts)


def render_message(message: Message) -> str:
    css = "message user" if message.sender == "user" else "message ai"
    return f'<div class="{css}">{render_text(message.text)}</div>'


def to_view(session: ChatSession) -> SessionView:
    state = session.state()
    return SessionView(
        session_id=session.session_id,
        screen=session.screen.key,
        messages=[MessageView(sender=m.sender, text=m.text, html=render_text(m.text)) for m in state.messages],
        draft_input=state.draft_input,
        pending=state.pending,
        loading_text=session.screen.loading_text,
    )


def _page(title: str, body: str, script: bool = False) -> str:
    tag = f'<script src="{SCRIPT_URL}" defer></script>\n' if script else ""
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{html.escape(title)}</title>\n"
        f'<link rel="stylesheet" href="{STYLESHEET_URL}">\n'
        f"{tag}"
        "</head>\n<body>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )


def render_page(session: ChatSession, action: str) -> str:
    """Full chat page. Enter in the text field posts the same form as the button.

    While a reply is pending, chat.js long-polls the session and swaps the
    message list in place, so the text field keeps whatever is being typed.
    """
    state = session.state()
    screen = session.screen
    rows = [render_message(m) for m in state.messages]
    if state.pending:
        rows.append(f'<div class="loading">{html.escape(screen.loading_text)}</div>')

    disabled = " disabled" if state.pending else ""
    label = "..." if state.pending else screen.submit_label
    pending_attr = "true" if state.pending else "false"
    body = (
        '<div class="container">\n'
        f"<h1>{html.escape(screen.title)}</h1>\n"
        f'<div class="chat-window" id="chat-window" data-session="{html.escape(session.session_id)}" '
        f'data-pending="{pending_attr}">\n' + "\n".join(rows) + "\n</div>\n"
        f'<form class="input-container" method="post" action="{html.escape(action)}">\n'
        f'<input type="text" name="draft" autofocus autocomplete="off" '
        f'placeholder="{html.escape(screen.placeholder)}" value="{html.escape(state.draft_input)}">\n'
        f'<button type="submit" data-label="{html.escape(screen.submit_label)}"{disabled}>{html.escape(label)}</button>\n'
        "</form>\n"
        "</div>"
    )
    return _page(screen.title, body, script=True)


def render_index(screens: List[ScreenConfig]) -> str:
    items = "\n".join(
        f'<li><a href="/screens/{html.escape(s.key)}">{html.escape(s.title)}</a> {html.escape(s.description)}</li>'
        for s in screens
    )
    return _page("Screens", f'<div class="container">\n<h1>Screens</h1>\n<ul>\n{items}\n</ul>\n</div>')
