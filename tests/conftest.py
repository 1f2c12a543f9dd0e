# tests/conftest.py
import copy
import json

import pytest

from text_transformation.adapters.persistence.config_loader import ConfigLoader, parse_configuration
from text_transformation.core.services.filename_generator import FilenameGenerator
from text_transformation.core.services.text_normalizer import TextNormalizer
from text_transformation.core.services.transformation_engine import TransformationEngine

_BASE_DOCUMENT = {
    "lexicon": {
        "acronyms": {
            "aks": {"canonical": "AKS", "expansion": "Azure Kubernetes Service"},
            "vm": {"canonical": "VM", "plural": "VMs", "expansion": "virtual machine"},
            "id": {"canonical": "ID", "plural": "IDs"},
            "sql": {"canonical": "SQL", "expansion": "Structured Query Language"},
            "api": {"canonical": "API"},
            "ad": {"canonical": "AD", "preserveInTitleCase": False},
        },
        "abbreviations": {
            "eg": {"canonical": "e.g.", "expansion": "for example"},
            "ie": {"canonical": "i.e.", "expansion": "that is"},
            "etc": {"canonical": "etc."},
        },
        "compoundWords": {
            "nodepool": {"components": ["node", "pool"], "displayForm": "node pool"},
            "keyvault": {"components": ["key", "vault"], "displayForm": "Key Vault"},
        },
        "stopWords": ["a", "an", "and", "for", "in", "of", "the", "to"],
        "terms": {
            "aks": {"display": "Azure Kubernetes Service"},
            "sql": {"ref": "$lexicon.acronyms.sql.expansion"},
        },
    },
    "services": {
        "mappings": [
            {
                "mcpName": "aks",
                "shortName": "$lexicon.acronyms.aks",
                "brandName": "$lexicon.terms.aks.display",
                "filename": "azure-kubernetes-service",
            },
            {
                "mcpName": "storage",
                "shortName": "Storage",
                "brandName": "Azure Storage",
            },
            {
                "mcpName": "monitor",
                "category": "observability",
            },
        ]
    },
    "parameters": {
        "mappings": [
            {"parameter": "subscriptionId", "display": "subscription ID"},
            {"parameter": "vmSize", "display": "$lexicon.acronyms.vm", "description": "Size of the VM."},
        ]
    },
    "contexts": {
        "filename": {"rules": {"stopWords": "remove"}},
        "titleCase": {"rules": {"stopWords": "lowercase-unless-first"}},
        "display": {"rules": {"stopWords": "lowercase-unless-first"}},
    },
    "categoryDefaults": {
        "acronym": {"filenameTransform": "to-lowercase", "preserveInTitleCase": True},
    },
}


@pytest.fixture
def raw_config():
    """A fresh, mutable copy of the reference configuration document."""
    return copy.deepcopy(_BASE_DOCUMENT)


@pytest.fixture
def config(raw_config):
    return parse_configuration(raw_config)


@pytest.fixture
def normalizer(config):
    return TextNormalizer(config)


@pytest.fixture
def filename_generator(config):
    return FilenameGenerator(config)


@pytest.fixture
def engine(config):
    return TransformationEngine(config)


@pytest.fixture
def loader():
    """A loader with an empty cache, so tests never share configurations."""
    return ConfigLoader()


@pytest.fixture
def write_config(tmp_path):
    """
    Writes a configuration document to a temporary file and returns its path.
    Pass a dict for JSON, or a string to write raw (possibly broken) text.
    """
    def _write(document, name="transformation-config.json"):
        path = tmp_path / name
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(write_config, raw_config):
    return write_config(raw_config)
