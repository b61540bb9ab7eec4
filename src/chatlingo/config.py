from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List
import json
from pathlib import Path

DEFAULT_LANGUAGES = ["en", "pt", "es", "ru", "tr", "fr"]
DEFAULT_ENDPOINT = "https://translate.googleapis.com/translate_a/single"

@dataclass
class ChatConfig:
    name: str = "chatlingo"
    user_agent: str = "ChatLingo/0.1"
    endpoint: str = DEFAULT_ENDPOINT
    client_id: str = "gtx"
    timeout_s: float = 10.0
    http2: bool = True
    languages: List[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    summary_min_chars: int = 150
    summary_sentences: int = 3
    headers: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ChatConfig":
        # Simple dict→dataclass conversion
        return ChatConfig(
            name=data.get("name", "chatlingo"),
            user_agent=data.get("user_agent", "ChatLingo/0.1"),
            endpoint=data.get("endpoint", DEFAULT_ENDPOINT),
            client_id=data.get("client_id", "gtx"),
            timeout_s=float(data.get("timeout_s", 10.0)),
            http2=bool(data.get("http2", True)),
            languages=list(data.get("languages", DEFAULT_LANGUAGES)),
            summary_min_chars=int(data.get("summary_min_chars", 150)),
            summary_sentences=int(data.get("summary_sentences", 3)),
            headers=dict(data.get("headers", {})),
        )

    @staticmethod
    def load(path: Path) -> "ChatConfig":
        return ChatConfig.from_dict(json.loads(Path(path).read_text()))

    @staticmethod
    def load_json_str(s: str) -> "ChatConfig":
        return ChatConfig.from_dict(json.loads(s))

    def dump(self) -> str:
        data = {
            "name": self.name,
            "user_agent": self.user_agent,
            "endpoint": self.endpoint,
            "client_id": self.client_id,
            "timeout_s": self.timeout_s,
            "http2": self.http2,
            "languages": self.languages,
            "summary_min_chars": self.summary_min_chars,
            "summary_sentences": self.summary_sentences,
            "headers": self.headers,
        }
        return json.dumps(data, indent=2)

def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(ChatConfig().dump())
