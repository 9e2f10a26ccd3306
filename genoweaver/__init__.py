#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Package initialization and version metadata.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .version import __version__
from .errors import ConfigurationError, InvariantViolation

__all__ = ["__version__", "ConfigurationError", "InvariantViolation"]

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
