"""
Ready-made simulations matching the two reference configurations.

Both presets return a fully constructed :class:`wavesim.solvers.Wave`
with zeroed buffers, a computed obstacle mask and a started clock.
"""
from typing import Callable, Optional

from wavesim.components import HarmonicSource
from wavesim.core import GridDomain, BoundaryPolicy
from wavesim.solvers import Wave
from wavesim.utils.builders import parabolic_wedge, no_obstacles


def parabolic_wedge_scenario(
    width: int = 640,
    height: int = 480,
    boundary_policy=BoundaryPolicy.WALL,
    clock: Optional[Callable[[], float]] = None
) -> Wave:
    """
    Fast source in front of a parabolic wedge.

    c²=0.5, Dx²=Dt²=1. Source at column ``width // 16`` on the middle
    row, amplitude 20, 10 rad/s, ``last`` lagging by 0.5 rad.
    """
    domain = GridDomain(width, height, geometry=parabolic_wedge, fill_default_size=True)
    domain.add_source(HarmonicSource(
        pos=(domain.width // 16, domain.height // 2),
        amplitude=20.0,
        angular_rate=10.0,
        phase_offset=-0.5,
    ))
    return Wave(domain, wave_speed_squared=0.5, dx_squared=1.0, dt_squared=1.0,
                boundary_policy=boundary_policy, clock=clock)


def open_field_scenario(
    width: int = 640,
    height: int = 480,
    boundary_policy=BoundaryPolicy.WALL,
    clock: Optional[Callable[[], float]] = None
) -> Wave:
    """
    Slow source on the left edge of an obstacle-free grid.

    c²=0.1, Dx²=Dt²=1. Source at column 0 on the middle row,
    amplitude 30, 1 rad/s, ``last`` lagging by 0.1 rad.
    """
    domain = GridDomain(width, height, geometry=no_obstacles, fill_default_size=True)
    domain.add_source(HarmonicSource(
        pos=(0, domain.height // 2),
        amplitude=30.0,
        angular_rate=1.0,
        phase_offset=-0.1,
    ))
    return Wave(domain, wave_speed_squared=0.1, dx_squared=1.0, dt_squared=1.0,
                boundary_policy=boundary_policy, clock=clock)


SCENARIOS = {
    'wedge': parabolic_wedge_scenario,
    'open': open_field_scenario,
}
