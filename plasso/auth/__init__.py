"""
Member session helpers for web apps built on FastAPI.
"""
from .session import SessionGuard, decode_cookie, encode_cookie

__all__ = ["SessionGuard", "decode_cookie", "encode_cookie"]
