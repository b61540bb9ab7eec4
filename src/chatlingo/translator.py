from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Optional
import httpx
from .config import ChatConfig

log = logging.getLogger(__name__)

OK = "ok"
SERVICE_ERROR = "service_error"
MALFORMED = "malformed"

UNKNOWN_LANGUAGE = "Unknown"
TRANSLATION_UNAVAILABLE = "Translation unavailable."

@dataclass(frozen=True)
class ServiceResult:
    status: str
    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == OK

def display(result: Optional[ServiceResult], placeholder: str) -> str:
    """Text to show a user; failures collapse into the placeholder."""
    if result is None or not result.ok or not result.value:
        return placeholder
    return result.value

def make_client(cfg: ChatConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    headers = {"User-Agent": cfg.user_agent, **(cfg.headers or {})}
    kwargs: dict = {"headers": headers, "timeout": httpx.Timeout(cfg.timeout_s)}
    if transport is not None:
        kwargs["transport"] = transport
    else:
        kwargs["http2"] = cfg.http2
    return httpx.AsyncClient(**kwargs)

async def _query(client: httpx.AsyncClient, cfg: ChatConfig, text: str, target: str) -> Any:
    params = {"client": cfg.client_id, "sl": "auto", "tl": target, "dt": "t", "q": text}
    r = await client.get(cfg.endpoint, params=params)
    r.raise_for_status()
    return r.json()

async def detect_language(client: httpx.AsyncClient, cfg: ChatConfig, text: str) -> ServiceResult:
    # Source language sits at index 2 of the response array
    try:
        data = await _query(client, cfg, text, "en")
    except httpx.HTTPError as ex:
        log.warning("language detection failed: %r", ex)
        return ServiceResult(SERVICE_ERROR, error=repr(ex))
    except ValueError as ex:
        log.warning("language detection returned non-JSON body: %r", ex)
        return ServiceResult(MALFORMED, error=repr(ex))

    lang = data[2] if isinstance(data, list) and len(data) > 2 else None
    if not isinstance(lang, str) or not lang:
        log.warning("language detection response has no source language")
        return ServiceResult(MALFORMED, error="missing source language")
    log.debug("detected %s", lang)
    return ServiceResult(OK, value=lang)

async def translate_text(client: httpx.AsyncClient, cfg: ChatConfig, text: str, target: str) -> ServiceResult:
    if target not in cfg.languages:
        raise ValueError(f"unsupported target language {target!r}; pick one of {', '.join(cfg.languages)}")
    try:
        data = await _query(client, cfg, text, target)
    except httpx.HTTPError as ex:
        log.warning("translation to %s failed: %r", target, ex)
        return ServiceResult(SERVICE_ERROR, error=repr(ex))
    except ValueError as ex:
        log.warning("translation returned non-JSON body: %r", ex)
        return ServiceResult(MALFORMED, error=repr(ex))

    # [[["translated", "original", ...], ...], None, "en", ...]
    segments = data[0] if isinstance(data, list) and data else None
    if not isinstance(segments, list):
        log.warning("translation response has no segment list")
        return ServiceResult(MALFORMED, error="missing segments")
    parts = [seg[0] for seg in segments if isinstance(seg, list) and seg and isinstance(seg[0], str)]
    joined = " ".join(parts)
    if not joined:
        log.warning("translation response has empty segments")
        return ServiceResult(MALFORMED, error="empty translation")
    return ServiceResult(OK, value=joined)
