from wavesim.utils.builders import (
    no_obstacles,
    parabolic_wedge,
    rectangle,
    disc,
    double_slit,
    union,
)
