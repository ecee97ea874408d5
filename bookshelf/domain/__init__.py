# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .books import Book
from .exceptions import InvariantViolation
from .users import TokenClaims, User

__all__ = ["Book", "InvariantViolation", "TokenClaims", "User"]
