"""Adaptadores de I/O: cliente HTTP, transporte, decodificación y endpoints."""
