"""Text analyzer: mention extraction, sentiment, confidence and relevance.

All functions are pure and deterministic given their inputs. They are shared
by every provider adapter and never perform I/O.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

SENTENCE_DELIMITERS = re.compile(r"[.!?]+")

POSITIVE_WORDS = (
    "excellent", "great", "outstanding", "best", "amazing", "perfect", "love",
    "recommend", "recommended", "recommends", "innovative", "impressive",
    "good", "helpful", "valuable", "reliable", "trusted",
)
NEGATIVE_WORDS = (
    "terrible", "bad", "worst", "awful", "hate", "poor", "disappointing",
    "avoid", "failure", "useless", "unreliable", "outdated", "overpriced",
    "buggy", "frustrating",
)

_POSITIVE_RE = re.compile(r"\b(?:" + "|".join(POSITIVE_WORDS) + r")\b", re.IGNORECASE)
_NEGATIVE_RE = re.compile(r"\b(?:" + "|".join(NEGATIVE_WORDS) + r")\b", re.IGNORECASE)

# Sentiment label thresholds on the continuous [-1, 1] score
POSITIVE_THRESHOLD = 0.15
NEGATIVE_THRESHOLD = -0.15

NEUTRAL_CONFIDENCE = 0.5
DENSITY_WEIGHT = 0.4

DEFAULT_TOPIC_TERMS = (
    "marketing", "automation", "platform", "business", "intelligence", "analytics",
)


def normalize_keywords(keywords: Iterable[str]) -> list[str]:
    """Drop blank keywords and case-insensitive duplicates, keeping input order."""
    seen: set[str] = set()
    result: list[str] = []
    for keyword in keywords:
        key = keyword.strip().lower()
        if key and key not in seen:
            seen.add(key)
            result.append(key)
    return result


def split_sentences(response: str) -> list[str]:
    return [s.strip() for s in SENTENCE_DELIMITERS.split(response) if s.strip()]


def extract_mentions(response: str, keywords: Sequence[str]) -> list[str]:
    """Return the sentences of ``response`` that contain any keyword.

    Sentences are collected keyword by keyword, in keyword order, and each
    sentence appears once at the position where it was first matched.
    Sentences are split on `.`, `!` and `?` before matching, so a keyword
    that itself contains one of those characters (e.g. "Node.js") never
    matches.
    """
    needles = normalize_keywords(keywords)
    if not needles:
        return []

    sentences = split_sentences(response)
    lowered = [s.lower() for s in sentences]
    mentions: dict[str, None] = {}
    for needle in needles:
        for sentence, lower in zip(sentences, lowered):
            if needle in lower:
                mentions.setdefault(sentence)
    return list(mentions)


def score_sentiment(response: str) -> float:
    """Score ``response`` in [-1, 1] from positive and negative lexicon hits."""
    positive = len(_POSITIVE_RE.findall(response))
    negative = len(_NEGATIVE_RE.findall(response))
    total = positive + negative
    if total == 0:
        return 0.0
    return (positive - negative) / total


def sentiment_label(score: float) -> str:
    if score > POSITIVE_THRESHOLD:
        return "positive"
    if score < NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def score_confidence(response: str, keywords: Sequence[str]) -> float:
    """Confidence in [0, 1] derived from mention density per 100 characters.

    With no usable keywords the neutral default is returned. Otherwise the
    score starts at 0.5 and grows by up to 0.4 per mention per 100 characters,
    clamped to 1.0.
    """
    if not normalize_keywords(keywords):
        return NEUTRAL_CONFIDENCE
    mention_count = len(extract_mentions(response, keywords))
    density = mention_count / max(len(response) / 100, 1)
    return min(max(NEUTRAL_CONFIDENCE + density * DENSITY_WEIGHT, 0.0), 1.0)


def score_relevance(
    response: str,
    keywords: Sequence[str],
    query: str,
    topic_terms: Sequence[str] = DEFAULT_TOPIC_TERMS,
) -> float:
    """How closely ``response`` tracks the keywords, the query and the topic."""
    lower = response.lower()
    words = set(re.findall(r"[\w'-]+", lower))
    score = 0.0

    needles = normalize_keywords(keywords)
    if needles:
        score += sum(1 for k in needles if k in lower) / len(needles) * 0.5

    query_terms = [t for t in re.findall(r"[\w'-]+", query.lower()) if len(t) > 2]
    if query_terms:
        score += sum(1 for t in query_terms if t in words) / len(query_terms) * 0.3

    if topic_terms:
        score += sum(1 for t in topic_terms if t.lower() in words) / len(topic_terms) * 0.2

    return min(score, 1.0)
