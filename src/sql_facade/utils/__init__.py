"""Utility modules shared across SQL Facade."""
