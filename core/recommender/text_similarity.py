#!/usr/bin/env python3
"""
Text Similarity - Token-overlap (Jaccard) similarity between two texts.

Used to compare an internship's free-text requirements with an applicant's
cover letter. Short tokens (length <= 3 by default) are dropped instead of
using a stopword list. Only ASCII letters, digits and underscore form
words; any other character, accented letters included, splits tokens.
"""

import re
from collections import Counter
from typing import List, Optional

from core.utils import round_half_up

_NON_WORD = re.compile(r'[^\w\s]', re.ASCII)

DEFAULT_MIN_TOKEN_LENGTH = 3

STOP_WORDS = frozenset({
    'the', 'is', 'at', 'which', 'on', 'and', 'or', 'but', 'in', 'with',
    'for', 'to', 'of', 'a', 'an', 'as', 'by', 'from', 'this', 'that',
    'these', 'those', 'are', 'was', 'were', 'been', 'have', 'has', 'had',
    'will', 'would', 'can', 'could', 'should',
})


def tokenize(text: Optional[str], min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> List[str]:
    """Lowercase, replace non-word characters with spaces, keep tokens longer than min_token_length."""
    if not text:
        return []
    cleaned = _NON_WORD.sub(' ', text.lower())
    return [word for word in cleaned.split() if len(word) > min_token_length]


class TextSimilarity:
    """Jaccard similarity over qualifying word tokens, scaled to 0-100."""

    def __init__(self, min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH):
        self.min_token_length = min_token_length

    def similarity(self, text_a: Optional[str], text_b: Optional[str]) -> int:
        if not text_a or not text_b:
            return 0

        tokens_a = set(tokenize(text_a, self.min_token_length))
        tokens_b = set(tokenize(text_b, self.min_token_length))

        if not tokens_a or not tokens_b:
            return 0

        intersection = tokens_a & tokens_b
        union = tokens_a | tokens_b
        return round_half_up(len(intersection) / len(union) * 100)


def extract_keywords(text: Optional[str], limit: int = 20) -> List[str]:
    """
    Most frequent meaningful words in a text.

    Tokens must be longer than 3 characters and not in STOP_WORDS. Ties keep
    the order in which words first appear.
    """
    words = [w for w in tokenize(text) if w not in STOP_WORDS]
    if not words:
        return []

    # Counter.most_common keeps insertion order for equal counts
    return [word for word, _ in Counter(words).most_common(limit)]
