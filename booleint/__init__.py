"""Adaptive one-dimensional numeric integration with Boole's rule.

Finite, half-infinite and doubly-infinite intervals are supported:

    import math
    import booleint

    booleint.integrate(math.exp, -math.inf, 0.0, 1e-8)   # ~1.0
"""

import logging

logging.getLogger("booleint").addHandler(logging.NullHandler())

from booleint.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)
from booleint.numerics import (
    IntegrationResult,
    IntegrationStatus,
    IterationRecord,
    boole_panel,
    composite_boole,
    composite_simpson,
    integrate,
    integrate_boole,
    refine_breakpoints,
)

__version__ = "0.1.0"

__all__ = [
    "IntegrationResult",
    "IntegrationStatus",
    "IterationRecord",
    "boole_panel",
    "composite_boole",
    "composite_simpson",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "integrate",
    "integrate_boole",
    "refine_breakpoints",
    "set_level",
]
