"""Recicla Infrastructure Layer."""
