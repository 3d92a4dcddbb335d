"""Database engine, schema and model registry."""
