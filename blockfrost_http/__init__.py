"""
Typed async client for the Blockfrost Cardano indexing API.

Responses are decoded into pydantic records; transport, decoding and
API-reported failures all surface as ``blockfrost_http.errors.BlockfrostError``.
See DESIGN.md for full details.
"""

__all__ = ["config", "errors"]
