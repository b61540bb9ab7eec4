from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set
import httpx
from .config import ChatConfig
from .summarizer import should_offer_summary, summarize
from .translator import (
    ServiceResult, TRANSLATION_UNAVAILABLE, UNKNOWN_LANGUAGE,
    detect_language, display, translate_text,
)

log = logging.getLogger(__name__)

EMPTY_INPUT_ERROR = "Please enter some text before sending."

@dataclass
class Message:
    sender: str  # "You" | "AI"
    kind: str  # "user" | "language" | "translation" | "summary"
    text: str = ""
    result: Optional[ServiceResult] = None

@dataclass
class Turn:
    text: str
    detection: ServiceResult
    can_summarize: bool = False

@dataclass
class ChatState:
    messages: List[Message] = field(default_factory=list)
    turns: List[Turn] = field(default_factory=list)
    error: Optional[str] = None
    pending: Set[str] = field(default_factory=set)

def submit(state: ChatState, raw: str) -> Optional[str]:
    text = (raw or "").strip()
    if not text:
        state.error = EMPTY_INPUT_ERROR
        return None
    state.error = None
    state.messages.append(Message("You", "user", text))
    return text

def render_message(msg: Message) -> str:
    if msg.kind == "user":
        return f"{msg.sender}: {msg.text}"
    if msg.kind == "language":
        return f"{msg.sender}: Detected Language: {display(msg.result, UNKNOWN_LANGUAGE)}"
    if msg.kind == "translation":
        return f"{msg.sender}: Translated: {display(msg.result, TRANSLATION_UNAVAILABLE)}"
    if msg.kind == "summary":
        return f"{msg.sender}: Summary: {msg.text}"
    raise ValueError(f"unknown message kind {msg.kind!r}")

def render(state: ChatState) -> List[str]:
    return [render_message(m) for m in state.messages]

class ChatSession:
    """Drives one conversation. All mutation goes through ChatState; callers render it."""

    def __init__(self, cfg: ChatConfig, client: httpx.AsyncClient, state: Optional[ChatState] = None):
        self.cfg = cfg
        self.client = client
        self.state = state or ChatState()

    def _turn(self, index: int) -> Turn:
        if not 0 <= index < len(self.state.turns):
            raise ValueError(f"no message #{index}")
        return self.state.turns[index]

    async def send(self, raw: str) -> Optional[Turn]:
        text = submit(self.state, raw)
        if text is None:
            return None
        key = f"detect:{len(self.state.turns)}"
        self.state.pending.add(key)
        try:
            result = await detect_language(self.client, self.cfg, text)
        finally:
            self.state.pending.discard(key)
        self.state.messages.append(Message("AI", "language", result=result))
        turn = Turn(
            text=text,
            detection=result,
            can_summarize=result.ok and should_offer_summary(result.value or "", text, self.cfg.summary_min_chars),
        )
        self.state.turns.append(turn)
        return turn

    async def translate(self, turn_index: int, target: str) -> Message:
        turn = self._turn(turn_index)
        self.state.error = None
        key = f"translate:{turn_index}:{target}"
        self.state.pending.add(key)
        try:
            result = await translate_text(self.client, self.cfg, turn.text, target)
        finally:
            self.state.pending.discard(key)
        msg = Message("AI", "translation", result=result)
        self.state.messages.append(msg)
        return msg

    def summarize(self, turn_index: int) -> Message:
        turn = self._turn(turn_index)
        if not turn.can_summarize:
            raise ValueError("summary is only offered for English text over "
                             f"{self.cfg.summary_min_chars} characters")
        self.state.error = None
        msg = Message("AI", "summary", summarize(turn.text, self.cfg.summary_sentences))
        log.debug("summarized turn %d", turn_index)
        self.state.messages.append(msg)
        return msg
