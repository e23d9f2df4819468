"""Literal classification: type catalog, dispatch, inference and validation."""
