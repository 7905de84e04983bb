"""Embed cache gate: cached oEmbed rendering for tweet form fields."""

__version__ = "1.0.0"
