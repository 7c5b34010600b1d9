"""Interfaces/abstracciones del Core (Protocol)."""
