import httpx
import pytest
from chatlingo.config import ChatConfig

LONG_EN = (
    "The city council met on Monday to discuss the new park. The park will have a lake and "
    "a playground. Residents asked the council to add more trees to the park. The council "
    "agreed to plant trees next spring. Funding for the park comes from a city bond."
)

def google_payload(translated: str, source: str):
    return [[[translated, "orig", None, None, 10]], None, source]

def make_transport(source: str = "en", translations=None, status: int = 200, body=None):
    """Fake translate endpoint: echoes tl into a canned translation."""
    translations = translations or {}
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if status != 200:
            return httpx.Response(status, text="boom")
        if body is not None:
            return httpx.Response(200, text=body)
        tl = request.url.params["tl"]
        return httpx.Response(200, json=google_payload(translations.get(tl, "hello"), source))

    transport = httpx.MockTransport(handler)
    transport.seen = seen
    return transport

@pytest.fixture
def cfg():
    return ChatConfig(http2=False)
