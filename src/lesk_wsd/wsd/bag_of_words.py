"""Bag-of-words construction for glosses and contexts.

Normalization convention (applied identically to signatures and contexts so
that their overlap is meaningful):

1. Take the token's lemma; fall back to its surface form when no lemma exists.
2. Lower-case and strip leading/trailing punctuation ("river," -> "river").
3. Drop the token if nothing alphanumeric is left, or if either its surface
   form or its normalized form is a stopword.
"""

from __future__ import annotations

import re
import string
from collections import Counter
from typing import Iterable, List, Optional

from lesk_wsd.wsd.base import Annotator, BagOfWords, Token

# Words, allowing inner apostrophes and hyphens ("don't", "well-known")
_WORD_PATTERN = re.compile(r"[^\W_]+(?:['\-][^\W_]+)*")
_PUNCTUATION = string.punctuation + "‘’“”–—"


def regex_tokenize(text: str) -> List[Token]:
    """Split text into word tokens with a fixed regular expression.

    Used when no annotator is available. Produces surface forms only.

    Examples:
        >>> [t.surface for t in regex_tokenize("sloping land beside a river, water flow")]
        ['sloping', 'land', 'beside', 'a', 'river', 'water', 'flow']
    """
    if not text:
        return []
    return [
        Token(surface=match.group(0), position=i)
        for i, match in enumerate(_WORD_PATTERN.finditer(text))
    ]


class BagOfWordsBuilder:
    """Convert text or annotated tokens into a normalized bag of words.

    Attributes:
        stopwords: Lower-cased words to drop
        annotator: Optional annotator used to tokenize and lemmatize free text.
                   Without it, free text is split by ``regex_tokenize``.

    Example:
        >>> builder = BagOfWordsBuilder(stopwords={"a", "that"})
        >>> sorted(builder.to_bag("financial institution that accepts deposits"))
        ['accepts', 'deposits', 'financial', 'institution']
    """

    def __init__(self, stopwords: Iterable[str] = (), annotator: Optional[Annotator] = None):
        self.stopwords = frozenset(word.lower() for word in stopwords)
        self.annotator = annotator

    def normalize(self, token: Token) -> Optional[str]:
        """Return the bag entry for a token, or None if it must be dropped."""
        surface = (token.surface or "").lower()
        if surface in self.stopwords:
            return None

        form = (token.lemma or token.surface or "").lower().strip(_PUNCTUATION)
        if not form or not any(ch.isalnum() for ch in form):
            return None
        if form in self.stopwords:
            return None
        return form

    def from_tokens(self, tokens: Iterable[Token]) -> BagOfWords:
        """Build a bag from already-annotated tokens."""
        bag: BagOfWords = Counter()
        for token in tokens:
            form = self.normalize(token)
            if form is not None:
                bag[form] += 1
        return bag

    def to_bag(self, text: str) -> BagOfWords:
        """Tokenize free text (e.g., a gloss) and build its bag of words.

        Never fails: empty or all-stopword input yields an empty bag.
        """
        if not text or not text.strip():
            return Counter()

        if self.annotator is not None:
            tokens = self.annotator.tokenize(text)
        else:
            tokens = regex_tokenize(text)
        return self.from_tokens(tokens)
