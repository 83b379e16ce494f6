# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Flat-file product catalogue with bearer-token authentication."""

__version__ = "1.0.0"
