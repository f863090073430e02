from paperpharmacy.adapters.imaging.httpx_loader import HttpxImageLoader

__all__ = ["HttpxImageLoader"]
