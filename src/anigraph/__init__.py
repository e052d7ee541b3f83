# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""anigraph - async client for AniList user data."""

from anigraph.__about__ import __version__
from anigraph.client import AniList
from anigraph.errors import (
    AniGraphError,
    EmptyOptionsError,
    InvalidIdentifierError,
    InvalidOptionsError,
    TransportError,
    UnauthenticatedError,
)
from anigraph.user import User

__all__ = [
    "AniGraphError",
    "AniList",
    "EmptyOptionsError",
    "InvalidIdentifierError",
    "InvalidOptionsError",
    "TransportError",
    "UnauthenticatedError",
    "User",
    "__version__",
]
