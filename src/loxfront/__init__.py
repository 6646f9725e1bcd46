# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and expression parser for the Lox scripting language."""
