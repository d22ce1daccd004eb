"""Shared configuration, types, and errors.

This package holds the typed models and runtime settings
consumed by the ingest, store, and CLI layers.
"""
