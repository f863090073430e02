from paperpharmacy.adapters.covers.registry import build_cover_providers

__all__ = ["build_cover_providers"]
