from __future__ import annotations


class SafeError(Exception):
    """Base class for every error raised by safenet_core."""


class InvalidInput(SafeError):
    pass


class InvalidAmount(SafeError):
    pass


class InvalidXorUrl(SafeError):
    pass


class AuthError(SafeError):
    pass
