# text_transformation/core/services/text_normalizer.py
"""
Text normalization driven by the lexicon.

Turns programmatic identifiers ("resourceGroupName", "vmId") and raw
description text into natural-language strings. Every public method is total:
None, empty or whitespace-only input yields "".
"""
import re
from typing import List, Optional, Pattern, Tuple

from text_transformation.core.domain.models import (
    ACRONYM_CATEGORY,
    TITLE_CASE_CONTEXT,
    AcronymEntry,
    TransformationConfig,
)

STOP_WORD_RULE = "stopWords"
LOWERCASE_UNLESS_FIRST = "lowercase-unless-first"

_SENTENCE_ENDINGS = (".", "!", "?")


def is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def split_camel_case(identifier: str) -> List[str]:
    """
    Split an identifier at case transitions.

    A new token starts at an uppercase letter that is followed by a lowercase
    letter ("ABBRWord" -> "ABBR", "Word") or preceded by one
    ("wordWord" -> "word", "Word").
    """
    tokens: List[str] = []
    current: List[str] = []
    for i, ch in enumerate(identifier):
        if ch.isupper() and current:
            next_lower = i + 1 < len(identifier) and identifier[i + 1].islower()
            prev_lower = i > 0 and identifier[i - 1].islower()
            if next_lower or prev_lower:
                tokens.append("".join(current))
                current = []
        current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def capitalize_first(word: str) -> str:
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


class TextNormalizer:
    """
    Provides text normalization and transformation services.

    Holds no mutable state beyond the compiled abbreviation patterns, which are
    built once from the (immutable) configuration.
    """

    def __init__(self, config: TransformationConfig):
        if config is None:
            raise ValueError("TextNormalizer requires a configuration.")
        self.config = config
        self._abbreviation_patterns = self._compile_abbreviations()

    # --- Parameters ---

    def normalize_parameter(self, identifier: Optional[str]) -> str:
        """
        Return the display text for a parameter name.

        A configured parameter mapping wins verbatim; anything else is split
        and transformed algorithmically.
        """
        if is_blank(identifier):
            return ""

        mapping = self.config.parameters.find(identifier)
        if mapping is not None:
            return mapping.display

        return self.split_and_transform_programmatic_name(identifier)

    def split_and_transform_programmatic_name(self, identifier: Optional[str]) -> str:
        """
        Split a camelCase/PascalCase name and render each word:
        known acronyms in canonical form, unknown all-caps words as-is,
        everything else lowercased.

            "resourceGroupName" -> "resource group name"
            "vmId"              -> "VM ID"
        """
        if is_blank(identifier):
            return ""

        words: List[str] = []
        for token in split_camel_case(identifier.strip()):
            token = token.strip()
            if token:
                words.extend(self._segment_acronym_run(token))
        return " ".join(self._transform_word(w) for w in words)

    def _segment_acronym_run(self, token: str) -> List[str]:
        """
        Break an unknown uppercase run into known acronyms ("AKSVM" -> "AKS", "VM").

        Greedy longest-prefix match against the lexicon. If any part of the run
        is not covered by a known acronym the token is returned unchanged.
        """
        if len(token) < 3 or not all(ch.isupper() for ch in token):
            return [token]
        if self.config.lexicon.find_acronym(token) is not None:
            return [token]

        parts: List[str] = []
        pos = 0
        while pos < len(token):
            for end in range(len(token), pos, -1):
                if self.config.lexicon.find_acronym(token[pos:end]) is not None:
                    parts.append(token[pos:end])
                    pos = end
                    break
            else:
                return [token]
        return parts

    def _transform_word(self, word: str) -> str:
        acronym = self.config.lexicon.find_acronym(word)
        if acronym is not None:
            return acronym.canonical

        # All caps and more than one letter: an acronym we don't know about.
        if len(word) > 1 and all(ch.isupper() for ch in word):
            return word

        return word.lower()

    # --- Title case ---

    def to_title_case(self, text: Optional[str], context: str = TITLE_CASE_CONTEXT) -> str:
        """
        Title-case `text` while keeping acronyms canonical.

        Stop words stay lowercase when the context's `stopWords` rule is
        `lowercase-unless-first`, except as the first or last word.
        """
        if is_blank(text):
            return ""

        rules = self.config.context(context)
        lowercase_stop_words = rules.rule(STOP_WORD_RULE) == LOWERCASE_UNLESS_FIRST
        words = text.split()
        last = len(words) - 1
        result: List[str] = []

        for i, word in enumerate(words):
            if lowercase_stop_words and 0 < i < last and rules.is_stop_word(word, self.config.lexicon):
                result.append(word.lower())
                continue

            acronym = self.config.lexicon.find_acronym(word)
            if acronym is not None and self._preserve_in_title_case(acronym):
                result.append(acronym.canonical)
                continue

            result.append(capitalize_first(word))

        return " ".join(result)

    def _preserve_in_title_case(self, acronym: AcronymEntry) -> bool:
        if acronym.preserve_in_title_case is not None:
            return acronym.preserve_in_title_case
        defaults = self.config.category(ACRONYM_CATEGORY)
        if defaults is not None and defaults.preserve_in_title_case is not None:
            return defaults.preserve_in_title_case
        return True

    # --- Descriptions ---

    def _compile_abbreviations(self) -> Tuple[Tuple[Pattern[str], str], ...]:
        # Longest key first, then alphabetical, so output never depends on dict order.
        ordered = sorted(
            self.config.lexicon.abbreviations.items(),
            key=lambda kv: (-len(kv[0]), kv[0]),
        )
        return tuple(
            (re.compile(rf"\b{re.escape(key)}\b", re.IGNORECASE), entry.canonical)
            for key, entry in ordered
        )

    def replace_static_text(self, text: Optional[str]) -> str:
        """Replace every whole-word abbreviation with its canonical form."""
        if is_blank(text):
            return ""

        result = text
        for pattern, canonical in self._abbreviation_patterns:
            result = pattern.sub(lambda _m, c=canonical: c, result)
        return result

    def ensure_ends_period(self, text: Optional[str]) -> str:
        """Trim trailing whitespace and terminate the sentence with '.' if needed."""
        if is_blank(text):
            return ""

        text = text.rstrip()
        if not text.endswith(_SENTENCE_ENDINGS):
            return text + "."
        return text
