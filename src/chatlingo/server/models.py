from pydantic import BaseModel, Field
from typing import List, Optional

class SummarizeRequest(BaseModel):
    text: str
    sentences: int = Field(3, ge=1)

class SummarizeResponse(BaseModel):
    summary: str

class DetectRequest(BaseModel):
    text: str

class DetectResponse(BaseModel):
    language: str
    status: str

class TranslateRequest(BaseModel):
    text: str
    target: str = "en"

class TranslateResponse(BaseModel):
    translation: str
    status: str

class ChatAction(BaseModel):
    action: str  # send|translate|summarize
    text: Optional[str] = None
    turn: Optional[int] = None
    target: Optional[str] = None

class ChatReply(BaseModel):
    messages: List[str]
    error: Optional[str] = None
    turn: Optional[int] = None
    can_summarize: bool = False
