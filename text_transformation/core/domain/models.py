# text_transformation/core/domain/models.py
"""
Configuration model for the text transformation engine.

Every model is frozen: once `TransformationConfig` has been validated (and its
lexicon references resolved by the loader) it is shared read-only between all
normalizers, filename generators and façades, from any number of threads.

The dictionary-valued tables (lexicon tables, contexts, rules, category
defaults) are exposed as read-only `MappingProxyType` views.

Lookups against the lexicon and the mapping tables are case-insensitive.
Lexicon keys are casefolded during validation, and the mapping tables build
their casefolded indexes once in `model_post_init`.
"""
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PrivateAttr, field_validator

ACRONYM_CATEGORY = "acronym"
FILENAME_CONTEXT = "filename"
TITLE_CASE_CONTEXT = "titleCase"
DISPLAY_CONTEXT = "display"


def _fold(key: str) -> str:
    return key.strip().casefold()


def _casefold_keys(value: Any, table: str) -> Any:
    """Casefold the keys of a raw lexicon table, rejecting case-only duplicates."""
    if not isinstance(value, Mapping):
        return value
    folded: Dict[str, Any] = {}
    for key, entry in value.items():
        if not isinstance(key, str) or not key.strip():
            raise ValueError(f"{table} keys must be non-empty strings")
        norm = _fold(key)
        if norm in folded:
            raise ValueError(f"duplicate {table} key '{key}' (keys are case-insensitive)")
        folded[norm] = entry
    return folded


def _read_only(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


def _empty_table() -> Mapping[str, Any]:
    return MappingProxyType({})


def _reject_duplicates(identifiers: Iterable[str], kind: str) -> None:
    seen = set()
    for identifier in identifiers:
        norm = _fold(identifier)
        if norm in seen:
            raise ValueError(f"duplicate {kind} mapping for '{identifier}'")
        seen.add(norm)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# --- Lexicon ---

class AcronymEntry(_FrozenModel):
    """An acronym with its canonical spelling (e.g. 'vm' -> 'VM')."""
    canonical: str = Field(..., min_length=1)
    plural: Optional[str] = None
    expansion: Optional[str] = None
    # None defers to categoryDefaults.acronym.preserveInTitleCase
    preserve_in_title_case: Optional[bool] = Field(None, alias="preserveInTitleCase")


class AbbreviationEntry(_FrozenModel):
    """An abbreviation and its canonical replacement (e.g. 'eg' -> 'e.g.')."""
    canonical: str
    expansion: Optional[str] = None


class CompoundWordEntry(_FrozenModel):
    """A run-together word and the components it splits into (e.g. 'nodepool')."""
    components: Tuple[str, ...] = Field(..., min_length=1)
    join_strategy: str = Field("hyphenate", alias="joinStrategy")
    display_form: Optional[str] = Field(None, alias="displayForm")

    def hyphenated(self) -> str:
        return "-".join(self.components)


class TermEntry(_FrozenModel):
    """A product or brand term with its display text."""
    display: str = ""
    description: Optional[str] = None
    ref: Optional[str] = None


class Lexicon(_FrozenModel):
    """
    The central dictionary of canonical terms.
    All other sections of the configuration refer into it by key.
    """
    acronyms: Dict[str, AcronymEntry] = Field(default_factory=_empty_table)
    abbreviations: Dict[str, AbbreviationEntry] = Field(default_factory=_empty_table)
    compound_words: Dict[str, CompoundWordEntry] = Field(default_factory=_empty_table, alias="compoundWords")
    stop_words: FrozenSet[str] = Field(default_factory=frozenset, alias="stopWords")
    terms: Dict[str, TermEntry] = Field(
        default_factory=_empty_table,
        validation_alias=AliasChoices("terms", "azureTerms"),
    )

    @field_validator("acronyms", "abbreviations", "compound_words", "terms", mode="before")
    @classmethod
    def _fold_table_keys(cls, value: Any, info) -> Any:
        return _casefold_keys(value, info.field_name)

    @field_validator("acronyms", "abbreviations", "compound_words", "terms")
    @classmethod
    def _freeze_tables(cls, value: Dict[str, Any]) -> Mapping[str, Any]:
        return _read_only(value)

    @field_validator("stop_words", mode="before")
    @classmethod
    def _fold_stop_words(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(_fold(w) for w in value if isinstance(w, str) and w.strip())
        return value

    def find_acronym(self, term: str) -> Optional[AcronymEntry]:
        return self.acronyms.get(_fold(term)) if term else None

    def find_compound_word(self, term: str) -> Optional[CompoundWordEntry]:
        return self.compound_words.get(_fold(term)) if term else None

    def is_stop_word(self, term: str) -> bool:
        return bool(term) and _fold(term) in self.stop_words


# --- Mappings ---

class ServiceMapping(_FrozenModel):
    """Maps a service identifier (e.g. 'aks') to its brand name, short name and filename."""
    mcp_name: str = Field(..., min_length=1, alias="mcpName")
    short_name: Optional[str] = Field(None, alias="shortName")
    brand_name: Optional[str] = Field(None, alias="brandName")
    filename: Optional[str] = None
    category: Optional[str] = None


class ParameterMapping(_FrozenModel):
    """Maps a parameter name (e.g. 'subscriptionId') to its display text."""
    parameter: str = Field(..., min_length=1)
    display: str
    description: Optional[str] = None


class ServiceConfig(_FrozenModel):
    mappings: Tuple[ServiceMapping, ...] = ()

    _index: Dict[str, ServiceMapping] = PrivateAttr(default_factory=dict)

    @field_validator("mappings")
    @classmethod
    def _unique_services(cls, mappings: Tuple[ServiceMapping, ...]) -> Tuple[ServiceMapping, ...]:
        _reject_duplicates((m.mcp_name for m in mappings), "service")
        return mappings

    def model_post_init(self, __context: Any) -> None:
        self._index = {_fold(m.mcp_name): m for m in self.mappings}

    def find(self, identifier: str) -> Optional[ServiceMapping]:
        return self._index.get(_fold(identifier)) if identifier else None


class ParameterConfig(_FrozenModel):
    mappings: Tuple[ParameterMapping, ...] = ()

    _index: Dict[str, ParameterMapping] = PrivateAttr(default_factory=dict)

    @field_validator("mappings")
    @classmethod
    def _unique_parameters(cls, mappings: Tuple[ParameterMapping, ...]) -> Tuple[ParameterMapping, ...]:
        _reject_duplicates((m.parameter for m in mappings), "parameter")
        return mappings

    def model_post_init(self, __context: Any) -> None:
        self._index = {_fold(m.parameter): m for m in self.mappings}

    def find(self, identifier: str) -> Optional[ParameterMapping]:
        return self._index.get(_fold(identifier)) if identifier else None


# --- Contexts ---

class ContextRules(_FrozenModel):
    """
    A named rule set (e.g. 'filename', 'titleCase').

    `inclusions` are extra stop words for this context only; `exclusions` are
    words that are never treated as stop words in this context.
    """
    rules: Dict[str, str] = Field(default_factory=_empty_table)
    exclusions: Tuple[str, ...] = ()
    inclusions: Tuple[str, ...] = ()
    apply_category_defaults: bool = Field(True, alias="applyCategoryDefaults")

    @field_validator("rules")
    @classmethod
    def _freeze_rules(cls, value: Dict[str, str]) -> Mapping[str, str]:
        return _read_only(value)

    @field_validator("exclusions", "inclusions", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return () if value is None else value

    def rule(self, name: str) -> Optional[str]:
        return self.rules.get(name)

    def is_stop_word(self, word: str, lexicon: Lexicon) -> bool:
        folded = _fold(word)
        if not folded or folded in {_fold(w) for w in self.exclusions}:
            return False
        return folded in lexicon.stop_words or folded in {_fold(w) for w in self.inclusions}


class CategoryDefaults(_FrozenModel):
    filename_transform: Optional[str] = Field(None, alias="filenameTransform")
    display_transform: Optional[str] = Field(None, alias="displayTransform")
    preserve_in_title_case: Optional[bool] = Field(None, alias="preserveInTitleCase")


# --- Root ---

class TransformationConfig(_FrozenModel):
    """Root configuration object for all text transformations."""
    lexicon: Lexicon = Field(default_factory=Lexicon)
    services: ServiceConfig = Field(default_factory=ServiceConfig)
    parameters: ParameterConfig = Field(default_factory=ParameterConfig)
    contexts: Dict[str, ContextRules] = Field(default_factory=_empty_table)
    category_defaults: Dict[str, CategoryDefaults] = Field(default_factory=_empty_table, alias="categoryDefaults")

    @field_validator("contexts", "category_defaults")
    @classmethod
    def _freeze_sections(cls, value: Dict[str, Any]) -> Mapping[str, Any]:
        return _read_only(value)

    def context(self, name: str) -> ContextRules:
        """Return the named context, or an empty rule set if it is not configured."""
        return self.contexts.get(name) or _EMPTY_CONTEXT

    def category(self, name: str) -> Optional[CategoryDefaults]:
        return self.category_defaults.get(name)

    def summary(self) -> Dict[str, int]:
        return {
            "acronyms": len(self.lexicon.acronyms),
            "abbreviations": len(self.lexicon.abbreviations),
            "compound_words": len(self.lexicon.compound_words),
            "stop_words": len(self.lexicon.stop_words),
            "services": len(self.services.mappings),
            "parameters": len(self.parameters.mappings),
            "contexts": len(self.contexts),
        }


_EMPTY_CONTEXT = ContextRules()

__all__: List[str] = [
    "ACRONYM_CATEGORY",
    "FILENAME_CONTEXT",
    "TITLE_CASE_CONTEXT",
    "DISPLAY_CONTEXT",
    "AcronymEntry",
    "AbbreviationEntry",
    "CompoundWordEntry",
    "TermEntry",
    "Lexicon",
    "ServiceMapping",
    "ParameterMapping",
    "ServiceConfig",
    "ParameterConfig",
    "ContextRules",
    "CategoryDefaults",
    "TransformationConfig",
]
