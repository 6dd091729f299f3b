"""Zoom authentication strategies."""

from .token_factory import (
    REQUIRED_SCOPES,
    AccessTokenStrategy,
    AccountCredentialsStrategy,
    SignedTokenStrategy,
    create_token_strategy,
    resolve,
)

__all__ = [
    "REQUIRED_SCOPES",
    "AccessTokenStrategy",
    "AccountCredentialsStrategy",
    "SignedTokenStrategy",
    "create_token_strategy",
    "resolve",
]
