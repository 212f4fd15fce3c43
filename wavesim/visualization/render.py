import numpy as np
import matplotlib


def sigmoid(x):
    return 1.0 / (1.0 + np.exp(-x))


def field_to_rgb(snapshot, cmap: str = 'RdBu', wall_color=(0, 0, 0)) -> np.ndarray:
    """
    Map a snapshot to an RGB image.

    Field values are squashed into (0, 1) with a logistic function and
    looked up in a matplotlib colormap, so zero lands on the middle of
    the map. Wall cells are painted ``wall_color``.

    Parameters
    ----------
    snapshot : FieldSnapshot
        Frame to render.
    cmap : str, default='RdBu'
        Name of a registered matplotlib colormap.
    wall_color : tuple of int, default=(0, 0, 0)
        RGB colour of obstacle cells.

    Returns
    -------
    np.ndarray
        ``uint8`` array of shape ``(height, width, 3)``.
    """
    colormap = matplotlib.colormaps[cmap]

    with np.errstate(over='ignore'):
        levels = sigmoid(np.asarray(snapshot.field, dtype=float))

    rgba = colormap(levels, bytes=True)
    rgb = np.ascontiguousarray(rgba[..., :3])
    rgb[snapshot.walls] = wall_color
    return rgb
