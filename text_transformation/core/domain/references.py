# text_transformation/core/domain/references.py
"""
Lexicon reference tokens.

Mapping fields in the configuration may point into the lexicon instead of
repeating a term:

    "shortName": "$lexicon.acronyms.aks"            -> "AKS"
    "brandName": "$lexicon.terms.aks.display"       -> "Azure Kubernetes Service"
    "filename":  "$lexicon.compoundWords.nodepool"  -> "node-pool"

A raw field value parses into a small tagged union, `LiteralValue` or
`LexiconReference`. References are resolved eagerly while the configuration is
loaded, so nothing downstream ever sees the `$lexicon.` syntax. A reference
that cannot be resolved raises `UnresolvedReferenceError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from text_transformation.core.domain.exceptions import UnresolvedReferenceError
from text_transformation.core.domain.models import Lexicon, TermEntry

REFERENCE_PREFIX = "$lexicon."

# Fields that may carry a reference, per configuration section. Both the JSON
# key and the model field name are accepted on input, so both are resolved.
SERVICE_REFERENCE_FIELDS = ("shortName", "short_name", "brandName", "brand_name", "filename")
PARAMETER_REFERENCE_FIELDS = ("display", "description")


@dataclass(frozen=True)
class LiteralValue:
    value: str


@dataclass(frozen=True)
class LexiconReference:
    category: str
    key: str
    attribute: Optional[str] = None

    @property
    def token(self) -> str:
        parts = [self.category, self.key] + ([self.attribute] if self.attribute else [])
        return REFERENCE_PREFIX + ".".join(parts)


ConfigValue = Union[LiteralValue, LexiconReference]


def is_reference(raw: Any) -> bool:
    return isinstance(raw, str) and raw.startswith(REFERENCE_PREFIX)


def parse_value(raw: str, source: str = "<memory>") -> ConfigValue:
    """
    Parse a raw field value.

    Raises:
        UnresolvedReferenceError: the value uses the reference prefix but is not
            of the form `$lexicon.<category>.<key>[.<property>]`.
    """
    if not is_reference(raw):
        return LiteralValue(raw)

    parts = raw[len(REFERENCE_PREFIX):].split(".")
    if len(parts) not in (2, 3) or not all(p.strip() for p in parts):
        raise UnresolvedReferenceError(
            raw, "expected $lexicon.<category>.<key>[.<property>]", source
        )
    category, key = parts[0], parts[1]
    prop = parts[2] if len(parts) == 3 else None
    return LexiconReference(category=category, key=key, attribute=prop)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class ReferenceResolver:
    """Resolves parsed values against a single lexicon."""

    def __init__(self, lexicon: Lexicon, source: str = "<memory>", allow_terms: bool = True):
        self.lexicon = lexicon
        self.source = source
        self._handlers: Dict[str, Callable[[LexiconReference], str]] = {
            "acronyms": self._acronym,
            "abbreviations": self._abbreviation,
            "compoundWords": self._compound_word,
        }
        if allow_terms:
            self._handlers["terms"] = self._term
            self._handlers["azureTerms"] = self._term

    def resolve(self, value: ConfigValue) -> str:
        if isinstance(value, LiteralValue):
            return value.value
        handler = self._handlers.get(value.category)
        if handler is None:
            raise UnresolvedReferenceError(
                value.token, f"unknown lexicon category '{value.category}'", self.source
            )
        return handler(value)

    def resolve_raw(self, raw: Any) -> Any:
        """Resolve a raw field value; non-string values pass through untouched."""
        if not isinstance(raw, str):
            return raw
        return self.resolve(parse_value(raw, self.source))

    # --- Category handlers ---

    def _missing(self, ref: LexiconReference) -> UnresolvedReferenceError:
        return UnresolvedReferenceError(
            ref.token, f"no '{ref.key}' entry in lexicon.{ref.category}", self.source
        )

    def _bad_property(self, ref: LexiconReference) -> UnresolvedReferenceError:
        return UnresolvedReferenceError(
            ref.token, f"unknown property '{ref.attribute}' for lexicon.{ref.category}", self.source
        )

    def _acronym(self, ref: LexiconReference) -> str:
        entry = self.lexicon.find_acronym(ref.key)
        if entry is None:
            raise self._missing(ref)
        prop = ref.attribute or "canonical"
        if prop == "canonical":
            return entry.canonical
        if prop == "plural":
            return entry.plural or entry.canonical
        if prop == "expansion":
            return entry.expansion or entry.canonical
        raise self._bad_property(ref)

    def _abbreviation(self, ref: LexiconReference) -> str:
        entry = self.lexicon.abbreviations.get(ref.key.strip().casefold())
        if entry is None:
            raise self._missing(ref)
        prop = ref.attribute or "canonical"
        if prop == "canonical":
            return entry.canonical
        if prop == "expansion":
            return entry.expansion or entry.canonical
        raise self._bad_property(ref)

    def _compound_word(self, ref: LexiconReference) -> str:
        entry = self.lexicon.find_compound_word(ref.key)
        if entry is None:
            raise self._missing(ref)
        prop = ref.attribute or "components"
        if prop == "components":
            return entry.hyphenated()
        if prop == "displayForm":
            return entry.display_form or entry.hyphenated()
        raise self._bad_property(ref)

    def _term(self, ref: LexiconReference) -> str:
        entry = self.lexicon.terms.get(ref.key.strip().casefold())
        if entry is None:
            raise self._missing(ref)
        prop = ref.attribute or "display"
        if prop == "display":
            return entry.display
        if prop == "description":
            return entry.description or entry.display
        raise self._bad_property(ref)


def resolve_lexicon_terms(lexicon: Lexicon, source: str = "<memory>") -> Lexicon:
    """
    Resolve the `ref` field of lexicon terms.

    A term with a `ref` and no `display` takes its display from the referenced
    entry. Terms may only reference the other lexicon tables, never `terms`.
    """
    if not any(entry.ref for entry in lexicon.terms.values()):
        return lexicon

    resolver = ReferenceResolver(lexicon, source, allow_terms=False)
    terms: Dict[str, TermEntry] = {}
    for key, entry in lexicon.terms.items():
        if not entry.ref:
            terms[key] = entry
            continue
        resolved = resolver.resolve_raw(entry.ref)
        terms[key] = entry.model_copy(update={"ref": resolved, "display": entry.display or resolved})
    return lexicon.model_copy(update={"terms": MappingProxyType(terms)})


def _resolve_mapping_list(
    section: Any, fields: tuple, resolver: ReferenceResolver
) -> Any:
    if not isinstance(section, Mapping):
        return section
    mappings = section.get("mappings")
    if not isinstance(mappings, list):
        return dict(section)

    resolved: List[Any] = []
    for item in mappings:
        if not isinstance(item, Mapping):
            resolved.append(item)
            continue
        entry = dict(item)
        for name, value in list(entry.items()):
            if name in fields:
                entry[name] = resolver.resolve_raw(value)
            elif is_reference(value):
                raise UnresolvedReferenceError(
                    value, f"field '{name}' does not accept lexicon references", resolver.source
                )
        resolved.append(entry)
    return {**section, "mappings": resolved}


def resolve_references(raw: Mapping[str, Any], lexicon: Lexicon, source: str = "<memory>") -> Dict[str, Any]:
    """
    Return a copy of the raw configuration document with every reference in
    the service and parameter mappings replaced by its lexicon value.
    A reference in any other mapping field is rejected. The input mapping is
    not modified.
    """
    resolver = ReferenceResolver(lexicon, source)
    out = dict(raw)
    if "services" in out:
        out["services"] = _resolve_mapping_list(out["services"], SERVICE_REFERENCE_FIELDS, resolver)
    if "parameters" in out:
        out["parameters"] = _resolve_mapping_list(out["parameters"], PARAMETER_REFERENCE_FIELDS, resolver)
    return out


__all__ = [
    "REFERENCE_PREFIX",
    "LiteralValue",
    "LexiconReference",
    "ConfigValue",
    "is_reference",
    "parse_value",
    "ReferenceResolver",
    "resolve_lexicon_terms",
    "resolve_references",
]
