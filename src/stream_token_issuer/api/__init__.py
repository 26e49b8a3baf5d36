"""
stream_token_issuer.api

API package for the Stream Token Issuer service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error envelopes and request/response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: envelope parsing + identity gate + delegation to issuers.
