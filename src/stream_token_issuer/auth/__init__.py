"""
stream_token_issuer.auth

Identity gate package.

Responsibilities:
- Decode and validate upstream identity assertions.
- FastAPI dependency that turns a bearer assertion into an optional `Principal`.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The gate never rejects a request itself; the token issuers own the
# unauthenticated decision so it holds for every caller, HTTP or not.
