from .config_loader import ConfigLoader, parse_configuration

__all__ = ["ConfigLoader", "parse_configuration"]
