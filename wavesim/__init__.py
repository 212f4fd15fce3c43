from wavesim.core import (
    GridDomain,
    InvalidDimensionError,
    BoundaryPolicy,
    BoundaryResolver,
    FieldBuffers,
    FieldSnapshot,
    PDESolver,
)
from wavesim.components import Source, HarmonicSource, Listener
from wavesim.solvers import Wave
from wavesim.scenarios import parabolic_wedge_scenario, open_field_scenario

__version__ = "0.1.0"
