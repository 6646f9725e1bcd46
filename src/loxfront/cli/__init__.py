# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for loxfront."""
