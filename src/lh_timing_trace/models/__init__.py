"""Pydantic models for Lighthouse timing input and trace-event output."""
