"""
stream_token_issuer

Top-level package for the Stream Token Issuer service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Importing the package must not read settings or configure logging.
