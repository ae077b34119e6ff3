from docsum.services.summary.tokenizer import (
    NO_CONTENT_SUMMARY,
    Paragraphs,
    count_words,
    rank_keywords,
    summarize,
    tokenize,
)
from docsum.services.summary.types import SummaryOptions


def test_summarize_ranks_by_count_then_token() -> None:
    options = SummaryOptions(length=2, min_word_length=3, exclude_common=True)

    assert summarize("the cat sat on the mat the cat ran", options) == "cat (2), mat (1)"


def test_tokenize_lowercases_and_strips_edge_punctuation() -> None:
    options = SummaryOptions(min_word_length=1)

    assert tokenize('"Hello," (WORLD)! ... c++ e-mail', options) == ["hello", "world", "c", "e-mail"]


def test_tokenize_filters_short_tokens_and_stopwords() -> None:
    text = "Their engine would have been running about time"

    assert tokenize(text, SummaryOptions(min_word_length=4)) == [
        "their",
        "engine",
        "would",
        "have",
        "been",
        "running",
        "about",
        "time",
    ]
    assert tokenize(text, SummaryOptions(min_word_length=4, exclude_common=True)) == [
        "engine",
        "running",
    ]


def test_summarize_respects_length_limit() -> None:
    text = "alpha beta gamma delta epsilon alpha beta alpha"

    summary = summarize(text, SummaryOptions(length=3, min_word_length=1))

    assert summary == "alpha (3), beta (2), delta (1)"
    assert len(summary.split(", ")) == 3


def test_summarize_returns_sentinel_for_stopwords_only() -> None:
    options = SummaryOptions(min_word_length=1, exclude_common=True)

    assert summarize("The and of THAT, which; would.", options) == NO_CONTENT_SUMMARY
    assert summarize("", SummaryOptions()) == NO_CONTENT_SUMMARY
    assert summarize("plenty of words", SummaryOptions(length=0)) == NO_CONTENT_SUMMARY


def test_summarize_is_deterministic_for_ties() -> None:
    text = "zulu yankee xray whiskey victor uniform tango sierra"
    options = SummaryOptions(length=4, min_word_length=1)

    first = summarize(text, options)

    assert first == summarize(text, options)
    assert first == "sierra (1), tango (1), uniform (1), victor (1)"


def test_rank_keywords_counts_normalized_tokens_together() -> None:
    ranked = rank_keywords("Report report, REPORT. summary", SummaryOptions(min_word_length=4))

    assert ranked == [("report", 3), ("summary", 1)]


def test_count_words_uses_raw_whitespace_tokens() -> None:
    assert count_words("  one two\tthree\n\nfour -- ") == 5
    assert count_words("") == 0


def test_paragraphs_split_on_blank_lines_and_restart() -> None:
    paragraphs = Paragraphs("first line\nstill first\n\n\n\nsecond\n\n   \n\nthird")

    assert list(paragraphs) == ["first line\nstill first", "second", "third"]
    assert list(paragraphs) == list(paragraphs)
