"""Compose one OpenAPI document from per-route metadata and schema sidecars."""
