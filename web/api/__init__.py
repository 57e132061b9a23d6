"""API layer - plain view functions returning pydantic models."""
