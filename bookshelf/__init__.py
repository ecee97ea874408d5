# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Book-tracking web backend: JSON-file stores, JWT auth and rate limiting."""

__version__ = "0.1.0"
