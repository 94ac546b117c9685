"""Storage adapters and the backend selection factory."""
