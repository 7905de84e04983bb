"""Application layer: use cases and service ports.

Depends only on embedgate.domain; infrastructure is injected at the
composition root (embedgate.api.v1.dependencies).
"""
