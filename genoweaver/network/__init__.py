"""
GenoWeaver v0.1.0

Network module: gene regulatory network construction and state evaluation.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .gene_network import (
    RegulationSign,
    GeneNetwork,
    build_network,
    last_base_sign,
    table_namer,
    sign_rule_from_config,
    namer_from_config,
)
from .regulatory_state import RegulatoryState, sum_incoming, transition

__all__ = [
    "RegulationSign",
    "GeneNetwork",
    "build_network",
    "last_base_sign",
    "table_namer",
    "sign_rule_from_config",
    "namer_from_config",
    "RegulatoryState",
    "sum_incoming",
    "transition",
]
