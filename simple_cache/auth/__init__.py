"""Auth module for Simple-Cache."""

from .providers import EnvTokenProvider, StringTokenProvider

__all__ = ["EnvTokenProvider", "StringTokenProvider"]
