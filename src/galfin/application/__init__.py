"""Application layer: ports, DTOs and queries."""
