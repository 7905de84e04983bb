"""Infrastructure: cache stores, persistence, and external clients."""
