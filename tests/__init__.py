# tests/__init__.py
"""
Test Suite for the text transformation engine.

Organization:
- `core`: Domain models, reference resolution, normalizer, filename generator
  and façade, built from in-memory configuration documents.
- `adapters`: The JSON configuration loader, against temporary files.
- top level: Container wiring and the inspection CLI.
"""
