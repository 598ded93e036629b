"""Casos de uso del Core."""
