# tests/core/test_use_cases.py
from text_transformation.core.use_cases.validate_service_mappings import (
    ServiceCoverageReport,
    build_coverage_report,
    find_unmapped_services,
    suggest_service_mapping,
)


class TestFindUnmappedServices:
    def test_sorted_unique_and_lowercased(self, config):
        namespaces = ["Storage", "keyvault", "aks", "KeyVault", "  ", None, "acr"]
        assert find_unmapped_services(config, namespaces) == ["acr", "keyvault"]

    def test_all_mapped(self, config):
        assert find_unmapped_services(config, ["aks", "storage"]) == []


class TestSuggestServiceMapping:
    def test_with_brand_prefix(self, normalizer):
        mapping = suggest_service_mapping("key_vault", normalizer, "Azure")
        assert mapping.mcp_name == "key_vault"
        assert mapping.short_name == "Key Vault"
        assert mapping.brand_name == "Azure Key Vault"
        assert mapping.filename == "azure-key-vault"

    def test_camel_case_namespace(self, normalizer):
        mapping = suggest_service_mapping("storageSync", normalizer)
        assert mapping.short_name == "Storage Sync"
        assert mapping.brand_name == "Storage Sync"
        assert mapping.filename == "storagesync"

    def test_acronym_namespace(self, normalizer):
        mapping = suggest_service_mapping("vm", normalizer, "Microsoft Azure")
        assert mapping.short_name == "VM"
        assert mapping.brand_name == "Microsoft Azure VM"
        assert mapping.filename == "microsoft-azure-vm"


class TestCoverageReport:
    def test_report_counts(self, config, normalizer):
        report = build_coverage_report(config, ["aks", "acr", "keyvault", "acr"], normalizer, "Azure")
        assert isinstance(report, ServiceCoverageReport)
        assert report.existing_mapping_count == 3
        assert report.total_namespaces == 3
        assert report.new_mappings_needed == 2
        assert [s.mcp_name for s in report.suggestions] == ["acr", "keyvault"]
        assert not report.complete

    def test_complete_report(self, config):
        report = build_coverage_report(config, ["aks"])
        assert report.complete
        assert report.suggestions == []

    def test_serializes_with_camel_case_keys(self, config):
        data = build_coverage_report(config, ["acr"]).model_dump(by_alias=True)
        assert data["newMappingsNeeded"] == 1
        assert data["suggestions"][0]["mcpName"] == "acr"
        assert "timestamp" in data
