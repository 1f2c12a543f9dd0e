# tests/core/test_domain_models.py
import pytest
from pydantic import ValidationError

from text_transformation.core.domain.models import (
    CompoundWordEntry,
    ContextRules,
    Lexicon,
    ServiceConfig,
    ServiceMapping,
    TransformationConfig,
)


class TestLexiconModel:
    def test_keys_are_case_insensitive(self):
        """Lookups should ignore case on both the stored key and the query."""
        lexicon = Lexicon.model_validate({"acronyms": {"VM": {"canonical": "VM"}}})
        assert lexicon.find_acronym("vm").canonical == "VM"
        assert lexicon.find_acronym("Vm").canonical == "VM"
        assert lexicon.find_acronym("") is None

    def test_case_only_duplicate_keys_rejected(self):
        with pytest.raises(ValidationError):
            Lexicon.model_validate({
                "acronyms": {"vm": {"canonical": "VM"}, "VM": {"canonical": "VM"}}
            })

    def test_stop_words_are_casefolded(self):
        lexicon = Lexicon.model_validate({"stopWords": ["The", "of", "  "]})
        assert lexicon.stop_words == frozenset({"the", "of"})
        assert lexicon.is_stop_word("THE")

    def test_legacy_terms_key_accepted(self):
        lexicon = Lexicon.model_validate({"azureTerms": {"aks": {"display": "AKS"}}})
        assert lexicon.terms["aks"].display == "AKS"

    def test_acronym_requires_canonical(self):
        with pytest.raises(ValidationError):
            Lexicon.model_validate({"acronyms": {"vm": {"plural": "VMs"}}})

    def test_compound_word_requires_components(self):
        with pytest.raises(ValidationError):
            CompoundWordEntry(components=())
        assert CompoundWordEntry(components=("node", "pool")).hyphenated() == "node-pool"

    def test_tables_are_read_only(self, config):
        with pytest.raises(TypeError):
            config.lexicon.acronyms["new"] = config.lexicon.acronyms["vm"]
        with pytest.raises(TypeError):
            config.lexicon.terms["new"] = config.lexicon.terms["aks"]
        with pytest.raises(TypeError):
            config.contexts["filename"].rules["stopWords"] = "keep"
        with pytest.raises(TypeError):
            del config.category_defaults["acronym"]
        with pytest.raises(TypeError):
            Lexicon().abbreviations["eg"] = None


class TestServiceConfigModel:
    def test_find_is_case_insensitive(self):
        services = ServiceConfig(mappings=(ServiceMapping(mcp_name="aks", short_name="AKS"),))
        assert services.find("AKS").short_name == "AKS"
        assert services.find("storage") is None

    def test_duplicate_identifiers_rejected(self):
        with pytest.raises(ValidationError):
            ServiceConfig.model_validate({
                "mappings": [{"mcpName": "aks"}, {"mcpName": "AKS"}]
            })

    def test_models_are_frozen(self):
        mapping = ServiceMapping(mcp_name="aks")
        with pytest.raises(ValidationError):
            mapping.short_name = "AKS"


class TestContextRules:
    def test_inclusions_and_exclusions(self):
        lexicon = Lexicon.model_validate({"stopWords": ["of", "from"]})
        rules = ContextRules(inclusions=("via",), exclusions=("From",))
        assert rules.is_stop_word("of", lexicon)
        assert rules.is_stop_word("VIA", lexicon)
        assert not rules.is_stop_word("from", lexicon)

    def test_missing_context_is_empty(self):
        config = TransformationConfig()
        rules = config.context("nope")
        assert rules.rules == {}
        assert rules.apply_category_defaults is True


class TestTransformationConfig:
    def test_empty_document_is_valid(self):
        config = TransformationConfig.model_validate({})
        assert config.services.mappings == ()
        assert config.category("acronym") is None

    def test_summary_counts(self, config):
        summary = config.summary()
        assert summary["acronyms"] == 6
        assert summary["services"] == 3
        assert summary["parameters"] == 2
