"""Pydantic schemas exchanged with presentation layers."""
