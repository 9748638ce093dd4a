"""Desktop viewer and typed API helpers for PeerTube video instances."""

__version__ = "0.1.0"