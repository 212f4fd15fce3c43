from wavesim.core.domain import GridDomain, InvalidDimensionError, DEFAULT_SIZE
from wavesim.core.boundary import BoundaryPolicy, BoundaryResolver
from wavesim.core.fields import FieldBuffers
from wavesim.core.snapshot import FieldSnapshot
from wavesim.core.pdesolver import PDESolver
