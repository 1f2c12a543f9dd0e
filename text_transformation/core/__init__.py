"""
Core Domain Layer.

Pure transformation logic and the configuration model:
- No I/O. The configuration reaches the core already loaded and resolved.
- Defines the Port (`IConfigSource`) the persistence adapter implements.
"""
