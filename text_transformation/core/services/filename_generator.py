# text_transformation/core/services/filename_generator.py
import re
from typing import List, Optional, Tuple

import structlog

from text_transformation.core.domain.models import (
    ACRONYM_CATEGORY,
    FILENAME_CONTEXT,
    AcronymEntry,
    TransformationConfig,
)
from text_transformation.core.services.text_normalizer import STOP_WORD_RULE, is_blank

logger = structlog.get_logger()

REMOVE_STOP_WORDS = "remove"
FILENAME_EXTENSION = ".md"

_SEPARATORS_RE = re.compile(r"[-_ ]+")


class FilenameGenerator:
    """
    Generates documentation filenames using three-tier resolution:

    1. Service mapping: explicit `filename`, else `shortName` (highest priority)
    2. Compound word expansion from the lexicon, hyphen-joined
    3. The area name itself (fallback)
    """

    def __init__(self, config: TransformationConfig):
        if config is None:
            raise ValueError("FilenameGenerator requires a configuration.")
        self.config = config

    def resolve_base_name(self, area: str) -> Tuple[str, int]:
        """Return the un-cleaned base name for `area` and the tier that produced it."""
        mapping = self.config.services.find(area)
        if mapping is not None:
            if mapping.filename:
                return mapping.filename, 1
            if mapping.short_name:
                return mapping.short_name, 1

        compound = self.config.lexicon.find_compound_word(area)
        if compound is not None:
            return compound.hyphenated(), 2

        return area, 3

    def generate_filename(
        self,
        area: Optional[str],
        operation_part: Optional[str] = "",
        type_part: Optional[str] = "",
    ) -> str:
        """
        Build `{base}[-{operation}][-{type}].md`.

        The base name and the operation part are cleaned; the type part is
        appended literally. A blank area yields "".
        """
        if is_blank(area):
            return ""

        base, tier = self.resolve_base_name(area)
        logger.debug("filename_base_resolved", area=area, tier=tier, base=base)

        parts = [self.clean_filename(base)]
        if not is_blank(operation_part):
            parts.append(self.clean_filename(operation_part))
        if not is_blank(type_part):
            parts.append(type_part)

        parts = [p for p in parts if p]
        if not parts:
            return ""
        return "-".join(parts) + FILENAME_EXTENSION

    def clean_filename(self, text: Optional[str]) -> str:
        """
        Normalize a filename segment.

        Splits on '-', '_' and spaces, drops stop words (never the first word)
        when the filename context says so, renders acronyms through the acronym
        category's filename transform and lowercases everything else.

            "get-a-list-of-the-items" -> "get-list-items"
        """
        if is_blank(text):
            return ""

        rules = self.config.context(FILENAME_CONTEXT)
        remove_stop_words = rules.rule(STOP_WORD_RULE) == REMOVE_STOP_WORDS

        result: List[str] = []
        for word in _SEPARATORS_RE.split(text.strip()):
            if not word:
                continue

            if remove_stop_words and result and rules.is_stop_word(word, self.config.lexicon):
                continue

            acronym = self.config.lexicon.find_acronym(word)
            if acronym is not None:
                result.append(self._acronym_for_filename(acronym, rules.apply_category_defaults))
            else:
                result.append(word.lower())

        return "-".join(result)

    def _acronym_for_filename(self, acronym: AcronymEntry, apply_defaults: bool) -> str:
        defaults = self.config.category(ACRONYM_CATEGORY) if apply_defaults else None
        transform = defaults.filename_transform if defaults is not None else None
        if transform == "to-lowercase":
            return acronym.canonical.lower()
        if transform == "to-uppercase":
            return acronym.canonical.upper()
        return acronym.canonical

    def generate_main_service_filename(self, area: Optional[str]) -> str:
        """
        Filename for a service's landing page.

        An explicit mapping `filename` is used verbatim; short names, compound
        expansions and the area fallback are lowercased. No stop-word cleaning.
        """
        if is_blank(area):
            return ""

        mapping = self.config.services.find(area)
        if mapping is not None and mapping.filename:
            return mapping.filename + FILENAME_EXTENSION

        base, _tier = self.resolve_base_name(area)
        return base.lower() + FILENAME_EXTENSION
