"""Domain layer — variants, records, field policies, schemas, and checks.

This layer depends only on stdlib, pydantic, jsonschema, and structlog.
It must never import from services, commands, config, or output.
"""
