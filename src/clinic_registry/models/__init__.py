"""Pydantic models for the clinic registry."""
