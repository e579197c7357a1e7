# ============================================================
# Pantry Chat FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Screen profiles (via pantry_chat/screens/<screen>.yaml)
#   - One chat session controller per opened screen
#   - Support for Gemini, OpenAI, Ollama, or Echo clients
# ============================================================

import logging
import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

# --- Local imports ---
from pantry_chat.settings import settings
from pantry_chat.generate import GenerationClient, build_model_client
from pantry_chat.chat import ChatSession, ScreenConfig, ScreenNotFound, SessionStore, list_screens, load_screen
from pantry_chat.chat.presenter import SessionView, render_index, render_page, to_view

logging.basicConfig(level=settings.LOG_LEVEL, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger("pantry_chat")

# ------------------------------------------------------------
# 🔧 Model client + session store
# ------------------------------------------------------------
chat_gen = GenerationClient(model_client=build_model_client(settings))
sessions = SessionStore()

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

# ------------------------------------------------------------
# 🧠 Helpers
# ------------------------------------------------------------
def get_screen(key: str) -> ScreenConfig:
    try:
        return load_screen(settings.SCREENS_DIR, key)
    except ScreenNotFound:
        raise HTTPException(status_code=404, detail=f"Unknown screen: {key}")

def get_session(session_id: str, screen: Optional[str] = None) -> ChatSession:
    session = sessions.get(session_id)
    if session is None or (screen is not None and session.screen.key != screen):
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return session

def page_url(session: ChatSession) -> str:
    return f"/screens/{session.screen.key}/{session.session_id}"

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Pantry Chat API", version="0.1")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class SubmitRequest(BaseModel):
    text: str
    wait: bool = False

class SubmitResponse(BaseModel):
    accepted: bool
    session: SessionView

# ------------------------------------------------------------
# 💬 HTML screens (async so session state stays on the event loop)
# ------------------------------------------------------------
@app.get("/", response_class=HTMLResponse)
def index():
    return render_index(list_screens(settings.SCREENS_DIR))

@app.get("/screens/{screen}")
async def open_screen(screen: str):
    # every visit starts a fresh session
    session = sessions.create(get_screen(screen), chat_gen)
    logger.info("Session opened: session=%s screen=%s", session.session_id, screen)
    return RedirectResponse(page_url(session), status_code=303)

@app.get("/screens/{screen}/{session_id}", response_class=HTMLResponse)
async def show_screen(screen: str, session_id: str):
    session = get_session(session_id, screen)
    return render_page(session, action=page_url(session))

@app.post("/screens/{screen}/{session_id}")
async def submit_screen(screen: str, session_id: str, draft: str = Form(default="")):
    session = get_session(session_id, screen)
    session.set_draft(draft)
    session.submit()
    return RedirectResponse(page_url(session), status_code=303)

# ------------------------------------------------------------
# 🔌 JSON API
# ------------------------------------------------------------
@app.post("/api/screens/{screen}/sessions", response_model=SessionView)
async def create_session(screen: str):
    session = sessions.create(get_screen(screen), chat_gen)
    return to_view(session)

@app.get("/api/sessions/{session_id}", response_model=SessionView)
async def read_session(session_id: str, wait: bool = False):
    session = get_session(session_id)
    if wait:
        await session.wait()
    return to_view(session)

@app.post("/api/sessions/{session_id}/messages", response_model=SubmitResponse)
async def post_message(session_id: str, req: SubmitRequest):
    session = get_session(session_id)
    task = session.submit(req.text)
    if task is not None and req.wait:
        await session.wait()
    return SubmitResponse(accepted=task is not None, session=to_view(session))

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz() -> Dict[str, Any]:
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "engine": chat_gen.engine,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}
