"""Recicla Application Layer."""
