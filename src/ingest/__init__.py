"""Radar file ingestion.

This package loads raw measurement files and parses their header
and vector table into typed structures for the transform layer.
"""
