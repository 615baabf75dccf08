"""Case ingestion pipeline.

This package reads the raw case payload, validates records, and
drives grouping and rendering for one visualization run.
"""
