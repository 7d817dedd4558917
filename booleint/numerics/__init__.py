"""Numerical integration routines.

- Boole's and Simpson's panel rules with fixed-step composites
- Breakpoint refinement for finite and infinite intervals
- Adaptive Boole's rule integration with divergence detection
"""

from booleint.numerics.boole import (
    boole_panel,
    composite_boole,
    composite_simpson,
    simpson_panel,
    step_points,
)
from booleint.numerics.breakpoints import active_panels, refine_breakpoints
from booleint.numerics.integration import (
    IntegrationResult,
    IntegrationStatus,
    IterationRecord,
    integrate,
    integrate_boole,
)

__all__ = [
    "IntegrationResult",
    "IntegrationStatus",
    "IterationRecord",
    "active_panels",
    "boole_panel",
    "composite_boole",
    "composite_simpson",
    "integrate",
    "integrate_boole",
    "refine_breakpoints",
    "simpson_panel",
    "step_points",
]
