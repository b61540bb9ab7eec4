from __future__ import annotations
from typing import Dict, List, Tuple
import re
from collections import Counter

FALLBACK_SUMMARY = "Summary unavailable."
SENTENCE_SEP = ". "
SUMMARY_MIN_CHARS = 150

_WORD = re.compile(r"\b(\w+)\b", re.ASCII)

def split_sentences(text: str) -> List[str]:
    return text.split(SENTENCE_SEP)

def tokenize(text: str) -> List[str]:
    return _WORD.findall(text.lower())

def word_frequencies(text: str) -> Dict[str, int]:
    return Counter(tokenize(text))

def score_sentences(sentences: List[str], freq: Dict[str, int]) -> List[Tuple[str, int]]:
    return [(s, sum(freq.get(w, 0) for w in tokenize(s))) for s in sentences]

def summarize(text: str, target_sentence_count: int = 3) -> str:
    """
    Keyword-frequency extractive summary:
    - Split on ". " (period + one space)
    - Score each sentence by the document-wide counts of its words
    - Return the top-N sentences, highest score first

    Equal scores keep their original order (the sort is stable). Text with
    no more than N sentences comes back untouched. Summarizing a summary is
    not guaranteed to be a no-op.
    """
    if not text:
        return FALLBACK_SUMMARY
    if isinstance(target_sentence_count, bool) or not isinstance(target_sentence_count, int):
        raise ValueError(f"sentence count must be an int, got {target_sentence_count!r}")
    if target_sentence_count < 1:
        raise ValueError(f"sentence count must be >= 1, got {target_sentence_count}")

    sents = split_sentences(text)
    if len(sents) <= target_sentence_count:
        return text

    scored = score_sentences(sents, word_frequencies(text))
    top = sorted(scored, key=lambda x: x[1], reverse=True)[:target_sentence_count]
    return SENTENCE_SEP.join(s for s, _ in top) + "."

def should_offer_summary(language: str, text: str, min_chars: int = SUMMARY_MIN_CHARS) -> bool:
    # only English text long enough to be worth shortening
    return language == "en" and len(text) > min_chars
