"""Visibility analytics application package."""
