import pytest
from chatlingo.summarizer import (
    FALLBACK_SUMMARY, score_sentences, should_offer_summary, split_sentences,
    summarize, tokenize, word_frequencies,
)

CAT_TEXT = "The cat sat. The cat sat on the mat. Dogs bark loudly at night."

def test_empty_input_gives_fallback_for_any_count():
    assert summarize("") == FALLBACK_SUMMARY
    assert summarize("", 1) == FALLBACK_SUMMARY
    assert summarize("", 10) == FALLBACK_SUMMARY
    assert summarize("", 0) == FALLBACK_SUMMARY
    assert summarize("", -1) == FALLBACK_SUMMARY

def test_none_input_gives_fallback():
    assert summarize(None) == FALLBACK_SUMMARY

def test_short_input_returned_verbatim():
    text = "One sentence. Another one"
    assert summarize(text) == text
    assert summarize("Exactly three. Here we go. Done", 3) == "Exactly three. Here we go. Done"

def test_no_trailing_period_added_on_short_circuit():
    assert summarize("No period here", 1) == "No period here"

def test_scores_rank_cat_sentences_first():
    assert summarize(CAT_TEXT, 2) == "The cat sat on the mat. The cat sat."

def test_cat_scores():
    freq = word_frequencies(CAT_TEXT)
    assert freq["the"] == 3 and freq["cat"] == 2 and freq["dogs"] == 1
    scores = [s for _, s in score_sentences(split_sentences(CAT_TEXT), freq)]
    assert scores == [7, 12, 5]

def test_ties_keep_original_order():
    assert summarize("A. B. C. D.", 3) == "A. B. C."

def test_default_count_is_three():
    assert summarize("A. B. C. D.") == summarize("A. B. C. D.", 3)

def test_zero_scores_keep_original_order():
    text = "... !!! ... ?? ... -- ... ;;"
    assert split_sentences(text) == ["..", "!!! ..", "?? ..", "-- ..", ";;"]
    assert summarize(text, 2) == "... !!! ..."

def test_duplicate_tokens_counted_per_occurrence():
    freq = word_frequencies("go go go. stop")
    assert score_sentences(["go go go"], freq) == [("go go go", 9)]

def test_split_only_on_period_space():
    assert split_sentences("Dr.Who is here. Yes.No. ok") == ["Dr.Who is here", "Yes.No", "ok"]

def test_tokenize_is_lowercase_and_ascii_words():
    assert tokenize("Hello, WORLD_1! it's") == ["hello", "world_1", "it", "s"]
    assert tokenize("?!") == []

def test_output_never_longer_than_requested():
    text = ". ".join(f"Sentence number {i} talks about apples" for i in range(10))
    out = summarize(text, 4)
    assert len(split_sentences(out)) == 4

def test_superset_sentence_scores_at_least_as_high():
    text = "red blue. red blue green. red. blue green yellow"
    freq = word_frequencies(text)
    scores = dict(score_sentences(split_sentences(text), freq))
    assert scores["red blue green"] >= scores["red blue"] >= scores["red"]

def test_summary_of_summary_may_shorten_further():
    text = ". ".join(["alpha beta", "alpha", "beta gamma", "delta", "alpha beta gamma", "zeta"])
    once = summarize(text, 4)
    twice = summarize(once, 2)
    assert len(split_sentences(twice)) <= len(split_sentences(once))

@pytest.mark.parametrize("bad", [0, -1, 2.5, "3", True])
def test_invalid_count_rejected(bad):
    with pytest.raises(ValueError):
        summarize(CAT_TEXT, bad)

def test_should_offer_summary():
    long_text = "x" * 151
    assert should_offer_summary("en", long_text)
    assert not should_offer_summary("en", "x" * 150)
    assert not should_offer_summary("fr", long_text)
    assert should_offer_summary("en", "x" * 20, min_chars=10)
