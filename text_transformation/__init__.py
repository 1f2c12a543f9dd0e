"""
text_transformation
===================

Lexicon-driven text normalization and filename resolution for generated
tool documentation.

    from text_transformation import ConfigLoader, TransformationEngine

    config = ConfigLoader().load("data/config/transformation-config.json")
    engine = TransformationEngine(config)
    engine.normalize_parameter("subscriptionId")   # "subscription ID"
    engine.generate_filename("aks", "get-cluster")  # "azure-kubernetes-service-get-cluster.md"
"""

from text_transformation.adapters.persistence.config_loader import ConfigLoader
from text_transformation.core.domain.exceptions import (
    ConfigurationNotFoundError,
    MalformedConfigurationError,
    TransformationConfigError,
    UnresolvedReferenceError,
)
from text_transformation.core.domain.models import TransformationConfig
from text_transformation.core.services.filename_generator import FilenameGenerator
from text_transformation.core.services.text_normalizer import TextNormalizer
from text_transformation.core.services.transformation_engine import TransformationEngine

__version__ = "1.0.0"

__all__ = [
    "ConfigLoader",
    "TransformationConfig",
    "TextNormalizer",
    "FilenameGenerator",
    "TransformationEngine",
    "TransformationConfigError",
    "ConfigurationNotFoundError",
    "MalformedConfigurationError",
    "UnresolvedReferenceError",
]
