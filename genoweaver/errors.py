#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Exception types shared across the genome, network and development modules.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""


class ConfigurationError(ValueError):
    """Raised when an operation is called with unusable parameters."""
    pass


class InvariantViolation(AssertionError):
    """
    Raised when an internal invariant is broken.

    These indicate programming errors (e.g. a regulatory state sized for a
    different network) and are never corrected silently.
    """
    pass

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
