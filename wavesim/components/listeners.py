from typing import Optional, Tuple, List
import numpy as np


class Listener:
    """
    Point receiver for recording field values over time.

    Parameters
    ----------
    pos : sequence of int
        Cell position ``(x, y)``.
    tag : str, default='mic'
        Label for plotting and debugging.

    Attributes
    ----------
    pos : tuple of int
        Listener position.
    grid_idx : tuple of int or None
        Array index ``(y, x)`` assigned by the domain upon registration.
    """

    def __init__(self, pos, tag: str = 'mic') -> None:
        self.pos = tuple(int(p) for p in pos)
        self.tag = tag
        self.grid_idx: Optional[Tuple[int, int]] = None
        self.history: List[float] = []
        self.times: List[float] = []

    def register(self, domain) -> None:
        """
        Calculates the array index based on the domain geometry.
        Called automatically when added to a domain.
        """
        self.grid_idx = domain.cell_to_index(self.pos)

        if domain.is_wall[self.grid_idx]:
            print(f"⚠️ Warning: Listener '{self.tag}' at {self.pos} is inside a wall!")

    def reset(self) -> None:
        """Clear recorded data for a new simulation run."""
        self.history = []
        self.times = []

    def record(self, t: float, u_field: np.ndarray) -> None:
        if self.grid_idx is None:
            raise ValueError(f"Listener '{self.tag}' has not been registered with a domain.")

        self.history.append(float(u_field[self.grid_idx]))
        self.times.append(t)

    def get_time_series(self) -> Tuple[np.ndarray, np.ndarray]:
        return np.array(self.times), np.array(self.history)

    def peak_amplitude(self) -> float:
        """Largest absolute value recorded so far, 0.0 if nothing was recorded."""
        if not self.history:
            return 0.0
        return float(np.max(np.abs(self.history)))
