from .text_normalizer import TextNormalizer
from .filename_generator import FilenameGenerator
from .transformation_engine import TransformationEngine

__all__ = ["TextNormalizer", "FilenameGenerator", "TransformationEngine"]
