"""Record output layer.

This module persists loaded record sets for downstream tools.
"""
