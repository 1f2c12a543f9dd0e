# text_transformation/core/services/transformation_engine.py
from typing import Optional

from text_transformation.core.domain.models import DISPLAY_CONTEXT, TITLE_CASE_CONTEXT, TransformationConfig
from text_transformation.core.services.filename_generator import FilenameGenerator
from text_transformation.core.services.text_normalizer import TextNormalizer, is_blank


class TransformationEngine:
    """
    Façade over the text normalizer and the filename generator.

    This is the surface documentation generators, template renderers and
    prompt assemblers call into. It holds nothing but the shared, immutable
    configuration, so one instance can serve any number of concurrent callers.
    """

    def __init__(
        self,
        config: TransformationConfig,
        text_normalizer: Optional[TextNormalizer] = None,
        filename_generator: Optional[FilenameGenerator] = None,
    ):
        if config is None:
            raise ValueError("TransformationEngine requires a configuration.")
        self._config = config
        self._text_normalizer = text_normalizer or TextNormalizer(config)
        self._filename_generator = filename_generator or FilenameGenerator(config)

    @property
    def config(self) -> TransformationConfig:
        return self._config

    @property
    def text_normalizer(self) -> TextNormalizer:
        return self._text_normalizer

    @property
    def filename_generator(self) -> FilenameGenerator:
        return self._filename_generator

    # --- Services ---

    def get_service_display_name(self, mcp_name: Optional[str]) -> str:
        """Brand name from the service mapping, else the title-cased identifier."""
        if is_blank(mcp_name):
            return ""

        mapping = self._config.services.find(mcp_name)
        if mapping is not None and mapping.brand_name:
            return mapping.brand_name
        return self._text_normalizer.to_title_case(mcp_name, DISPLAY_CONTEXT)

    def get_service_short_name(self, mcp_name: Optional[str]) -> str:
        """Short name from the service mapping, else the identifier unchanged."""
        if is_blank(mcp_name):
            return ""

        mapping = self._config.services.find(mcp_name)
        if mapping is not None and mapping.short_name:
            return mapping.short_name
        return mcp_name

    # --- Text ---

    def transform_description(self, description: Optional[str]) -> str:
        """Apply abbreviation replacements and make sure the text ends with a period."""
        if is_blank(description):
            return ""

        transformed = self._text_normalizer.replace_static_text(description)
        return self._text_normalizer.ensure_ends_period(transformed)

    def normalize_parameter(self, identifier: Optional[str]) -> str:
        return self._text_normalizer.normalize_parameter(identifier)

    def to_title_case(self, text: Optional[str], context: str = TITLE_CASE_CONTEXT) -> str:
        return self._text_normalizer.to_title_case(text, context)

    # --- Filenames ---

    def generate_filename(
        self,
        area: Optional[str],
        operation_part: Optional[str] = "",
        type_part: Optional[str] = "",
    ) -> str:
        return self._filename_generator.generate_filename(area, operation_part, type_part)

    def generate_main_service_filename(self, area: Optional[str]) -> str:
        return self._filename_generator.generate_main_service_filename(area)

    def clean_filename(self, text: Optional[str]) -> str:
        return self._filename_generator.clean_filename(text)
