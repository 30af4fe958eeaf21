"""Application layer - normalization and negotiation services."""
