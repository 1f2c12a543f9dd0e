# tests/core/test_text_normalizer.py
import pytest

from text_transformation.adapters.persistence.config_loader import parse_configuration
from text_transformation.core.services.text_normalizer import TextNormalizer, split_camel_case


class TestSplitCamelCase:
    @pytest.mark.parametrize("identifier, expected", [
        ("resourceGroupName", ["resource", "Group", "Name"]),
        ("VMName", ["VM", "Name"]),
        ("vmId", ["vm", "Id"]),
        ("ABBR", ["ABBR"]),
        ("name", ["name"]),
    ])
    def test_splits_on_case_transitions(self, identifier, expected):
        assert split_camel_case(identifier) == expected


class TestNormalizeParameter:
    def test_mapping_wins_verbatim(self, normalizer):
        assert normalizer.normalize_parameter("subscriptionId") == "subscription ID"

    def test_mapping_lookup_ignores_case(self, normalizer):
        assert normalizer.normalize_parameter("SUBSCRIPTIONID") == "subscription ID"

    def test_resolved_reference_in_mapping(self, normalizer):
        assert normalizer.normalize_parameter("vmSize") == "VM"

    def test_falls_back_to_splitting(self, normalizer):
        assert normalizer.normalize_parameter("resourceGroupName") == "resource group name"

    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_blank_input(self, normalizer, blank):
        assert normalizer.normalize_parameter(blank) == ""


class TestSplitAndTransform:
    def test_acronyms_become_canonical(self, normalizer):
        assert normalizer.split_and_transform_programmatic_name("vmId") == "VM ID"

    def test_unknown_uppercase_word_is_kept(self, normalizer):
        assert normalizer.split_and_transform_programmatic_name("useHTTPS") == "use HTTPS"

    def test_uppercase_run_of_known_acronyms_is_segmented(self, normalizer):
        assert normalizer.split_and_transform_programmatic_name("AKSVMName") == "AKS VM name"

    def test_partially_known_run_stays_intact(self, normalizer):
        assert normalizer.split_and_transform_programmatic_name("AKSXYZ") == "AKSXYZ"

    def test_single_capital_is_lowercased(self, normalizer):
        assert normalizer.split_and_transform_programmatic_name("getAValue") == "get a value"


class TestToTitleCase:
    def test_acronyms_preserved(self, normalizer):
        assert normalizer.to_title_case("get vm id") == "Get VM ID"

    def test_inner_stop_words_lowercase(self, normalizer):
        assert normalizer.to_title_case("get a list of the items") == "Get a List of the Items"

    def test_first_and_last_stop_words_capitalized(self, normalizer):
        assert normalizer.to_title_case("a list of items") == "A List of Items"
        assert normalizer.to_title_case("what to") == "What To"

    def test_context_without_rule_capitalizes_everything(self, normalizer):
        assert normalizer.to_title_case("get a list", "unknown") == "Get A List"

    def test_acronym_with_preserve_disabled(self, normalizer):
        assert normalizer.to_title_case("ad users") == "Ad Users"

    def test_category_default_disables_preservation(self, raw_config):
        raw_config["categoryDefaults"]["acronym"]["preserveInTitleCase"] = False
        normalizer = TextNormalizer(parse_configuration(raw_config))
        assert normalizer.to_title_case("list vm") == "List Vm"

    def test_context_inclusions_and_exclusions(self, raw_config):
        raw_config["contexts"]["titleCase"]["inclusions"] = ["via"]
        raw_config["contexts"]["titleCase"]["exclusions"] = ["of"]
        normalizer = TextNormalizer(parse_configuration(raw_config))
        assert normalizer.to_title_case("copy via list of items") == "Copy via List Of Items"

    def test_idempotent(self, normalizer):
        once = normalizer.to_title_case("get a list of the vm items")
        assert normalizer.to_title_case(once) == once

    def test_whitespace_is_collapsed(self, normalizer):
        assert normalizer.to_title_case("  get   vm ") == "Get VM"

    def test_blank(self, normalizer):
        assert normalizer.to_title_case(None) == ""


class TestReplaceStaticText:
    def test_whole_word_case_insensitive(self, normalizer):
        assert normalizer.replace_static_text("Use tags, EG env") == "Use tags, e.g. env"

    def test_partial_words_untouched(self, normalizer):
        assert normalizer.replace_static_text("the legend") == "the legend"

    def test_longer_keys_replace_first(self, raw_config):
        raw_config["lexicon"]["abbreviations"] = {
            "vs": {"canonical": "versus"},
            "vs code": {"canonical": "Visual Studio Code"},
        }
        normalizer = TextNormalizer(parse_configuration(raw_config))
        assert normalizer.replace_static_text("open vs code vs vim") == "open Visual Studio Code versus vim"


class TestEnsureEndsPeriod:
    @pytest.mark.parametrize("text, expected", [
        ("Lists items", "Lists items."),
        ("Lists items.  ", "Lists items."),
        ("Really?", "Really?"),
        ("Stop!", "Stop!"),
        ("", ""),
    ])
    def test_terminates_sentence(self, normalizer, text, expected):
        assert normalizer.ensure_ends_period(text) == expected


def test_requires_configuration():
    with pytest.raises(ValueError):
        TextNormalizer(None)
