from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from .models import (
    ChatAction, ChatReply, DetectRequest, DetectResponse,
    SummarizeRequest, SummarizeResponse, TranslateRequest, TranslateResponse,
)
from ..chat import ChatSession, render_message
from ..config import ChatConfig
from ..summarizer import summarize
from ..translator import (
    TRANSLATION_UNAVAILABLE, UNKNOWN_LANGUAGE,
    detect_language, display, make_client, translate_text,
)
from pathlib import Path
import logging
import os

log = logging.getLogger(__name__)

CONFIG_PATH = Path(os.environ.get("CHATLINGO_CONFIG", "config.json"))

def _load_config() -> ChatConfig:
    if CONFIG_PATH.exists():
        return ChatConfig.load(CONFIG_PATH)
    return ChatConfig()

app = FastAPI(title="ChatLingo Service", version="0.1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # dev friendly; tighten later
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.config = _load_config()
app.state.transport = None  # tests inject httpx.MockTransport

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/summarize", response_model=SummarizeResponse)
def summarize_endpoint(req: SummarizeRequest):
    return SummarizeResponse(summary=summarize(req.text, req.sentences))

@app.post("/detect", response_model=DetectResponse)
async def detect_endpoint(req: DetectRequest):
    cfg = app.state.config
    async with make_client(cfg, app.state.transport) as client:
        result = await detect_language(client, cfg, req.text)
    return DetectResponse(language=display(result, UNKNOWN_LANGUAGE), status=result.status)

@app.post("/translate", response_model=TranslateResponse)
async def translate_endpoint(req: TranslateRequest):
    cfg = app.state.config
    if req.target not in cfg.languages:
        raise HTTPException(status_code=400, detail=f"unsupported target language {req.target!r}")
    async with make_client(cfg, app.state.transport) as client:
        result = await translate_text(client, cfg, req.text, req.target)
    return TranslateResponse(translation=display(result, TRANSLATION_UNAVAILABLE), status=result.status)

async def _apply(session: ChatSession, action: ChatAction) -> ChatReply:
    turn_index = action.turn
    if action.action == "send":
        turn = await session.send(action.text or "")
        if turn is not None:
            turn_index = len(session.state.turns) - 1
    elif action.action == "translate":
        if turn_index is None or not action.target:
            raise ValueError("translate needs 'turn' and 'target'")
        await session.translate(turn_index, action.target)
    elif action.action == "summarize":
        if turn_index is None:
            raise ValueError("summarize needs 'turn'")
        session.summarize(turn_index)
    else:
        raise ValueError(f"unknown action {action.action!r}")
    can_summarize = (
        turn_index is not None
        and 0 <= turn_index < len(session.state.turns)
        and session.state.turns[turn_index].can_summarize
    )
    return ChatReply(messages=[], error=session.state.error, turn=turn_index, can_summarize=can_summarize)

@app.websocket("/ws/chat")
async def ws_chat(ws: WebSocket):
    await ws.accept()
    cfg = app.state.config
    async with make_client(cfg, app.state.transport) as client:
        session = ChatSession(cfg, client)
        shown = 0
        try:
            while True:
                try:
                    action = ChatAction.model_validate(await ws.receive_json())
                    reply = await _apply(session, action)
                except ValueError as ex:
                    await ws.send_json(ChatReply(messages=[], error=str(ex)).model_dump())
                    continue
                # only lines added since the previous reply
                reply.messages = [render_message(m) for m in session.state.messages[shown:]]
                shown = len(session.state.messages)
                await ws.send_json(reply.model_dump())
        except WebSocketDisconnect:
            log.debug("chat client disconnected")
