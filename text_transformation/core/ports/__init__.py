from .config_source import IConfigSource

__all__ = ["IConfigSource"]
