"""oEmbed resolver client."""

from embedgate.infrastructure.external.oembed.client import OEmbedClient

__all__ = ["OEmbedClient"]
