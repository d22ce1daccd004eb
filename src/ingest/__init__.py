"""Delimited file ingestion.

This package scans past report preambles to the real header row
and parses the remaining text into records.
"""
