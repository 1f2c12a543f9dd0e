# text_transformation/core/domain/exceptions.py
class TransformationConfigError(Exception):
    """Base class for all configuration-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Loading Errors ---

class ConfigurationNotFoundError(TransformationConfigError, FileNotFoundError):
    """Raised when the configuration document does not exist at the given path."""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Configuration file not found: {path}")

class MalformedConfigurationError(TransformationConfigError):
    """Raised when the configuration document cannot be parsed or fails validation."""
    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"Malformed configuration in '{source}': {detail}")

# --- Reference Errors ---

class UnresolvedReferenceError(MalformedConfigurationError):
    """Raised when a '$lexicon.' reference points at a missing lexicon entry."""
    def __init__(self, reference: str, reason: str, source: str = "<memory>"):
        self.reference = reference
        self.reason = reason
        super().__init__(source, f"Unresolved lexicon reference '{reference}': {reason}")
