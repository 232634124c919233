"""Disposal DTOs."""

from recicla.application.disposal.dto.disposal_location import DisposalLocationDTO

__all__ = ["DisposalLocationDTO"]
