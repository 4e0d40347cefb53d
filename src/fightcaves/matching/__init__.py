"""Matching — accumulated observations and the filter over generated routes."""
