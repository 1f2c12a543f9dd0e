# text_transformation/core/use_cases/validate_service_mappings.py
"""
Service mapping coverage.

Finds service namespaces (the first word of each tool command) that have no
entry in `services.mappings` and proposes placeholder mappings for a human to
review before they are added to the configuration.
"""
import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from text_transformation.core.domain.models import ServiceMapping, TransformationConfig
from text_transformation.core.services.text_normalizer import TextNormalizer, is_blank

logger = structlog.get_logger()

_SLUG_RE = re.compile(r"[^a-z0-9]+")


class ServiceCoverageReport(BaseModel):
    """Result of checking a set of namespaces against the service mappings."""
    model_config = ConfigDict(populate_by_name=True)

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    existing_mapping_count: int = Field(..., alias="existingMappingCount")
    total_namespaces: int = Field(..., alias="totalNamespaces")
    new_mappings_needed: int = Field(..., alias="newMappingsNeeded")
    suggestions: List[ServiceMapping] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        return self.new_mappings_needed == 0


def _namespaces(namespaces: Iterable[Optional[str]]) -> List[str]:
    return sorted({ns.strip().lower() for ns in namespaces if not is_blank(ns)})


def find_unmapped_services(config: TransformationConfig, namespaces: Iterable[Optional[str]]) -> List[str]:
    """Sorted, de-duplicated, lowercased namespaces without a service mapping."""
    return [ns for ns in _namespaces(namespaces) if config.services.find(ns) is None]


def suggest_service_mapping(namespace: str, normalizer: TextNormalizer, brand_prefix: str = "") -> ServiceMapping:
    """
    Placeholder mapping for an unmapped namespace.

        suggest_service_mapping("keyvault", n, "Azure")
        -> shortName "Keyvault", brandName "Azure Keyvault", filename "azure-keyvault"
    """
    short_name = normalizer.to_title_case(
        normalizer.split_and_transform_programmatic_name(namespace.replace("_", " "))
    )
    prefix = brand_prefix.strip()
    brand_name = f"{prefix} {short_name}" if prefix else short_name
    slug_prefix = _SLUG_RE.sub("-", prefix.lower()).strip("-")
    slug = namespace.lower().replace("_", "-")
    filename = f"{slug_prefix}-{slug}" if slug_prefix else slug
    return ServiceMapping(mcp_name=namespace, short_name=short_name, brand_name=brand_name, filename=filename)


def build_coverage_report(
    config: TransformationConfig,
    namespaces: Iterable[Optional[str]],
    normalizer: Optional[TextNormalizer] = None,
    brand_prefix: str = "",
) -> ServiceCoverageReport:
    """Check `namespaces` against the configured service mappings."""
    normalizer = normalizer or TextNormalizer(config)
    unique = _namespaces(namespaces)
    unmapped = [ns for ns in unique if config.services.find(ns) is None]

    if unmapped:
        logger.warning("service_mappings_missing", count=len(unmapped), namespaces=unmapped)
    else:
        logger.info("service_mappings_complete", namespaces=len(unique))

    return ServiceCoverageReport(
        existing_mapping_count=len(config.services.mappings),
        total_namespaces=len(unique),
        new_mappings_needed=len(unmapped),
        suggestions=[suggest_service_mapping(ns, normalizer, brand_prefix) for ns in unmapped],
    )
