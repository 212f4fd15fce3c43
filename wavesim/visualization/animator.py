from typing import Optional, List
import numpy as np
import plotly.graph_objects as go

from wavesim.core.pdesolver import PDESolver


class PhysicsAnimator:
    """
    Interactive visualization for grid wave simulations.

    Runs the physics loop, keeps detached copies of the field and
    generates a Plotly heatmap animation with listener markers.

    Parameters
    ----------
    solver : PDESolver
        Configured solver instance.
    n_steps : int
        Number of steps to simulate.

    Attributes
    ----------
    history : list of np.ndarray
        Stored field frames with wall cells set to NaN.
    step_numbers : list of int
        Step count of each stored frame.
    """

    def __init__(self, solver: PDESolver, n_steps: int) -> None:
        self.solver = solver
        self.n_steps = int(n_steps)

        self.history: List[np.ndarray] = []
        self.step_numbers: List[int] = []

    def run(self, every: int = 1) -> None:
        """
        Execute the simulation and store field history.

        Parameters
        ----------
        every : int, default=1
            Keep one frame every ``every`` steps.
        """
        if every < 1:
            raise ValueError(f"every must be a positive integer, got {every}.")

        domain = self.solver.domain
        print(f"Simulating {self.n_steps} steps on a {domain.width}x{domain.height} grid...")

        for _ in range(self.n_steps):
            self.solver.step()
            if self.solver.steps % every == 0:
                self.history.append(self.solver.snapshot().masked())
                self.step_numbers.append(self.solver.steps)

        print("Simulation complete.")

    def create_animation(
        self,
        skip_frames: int = 10,
        skip_spatial: int = 4,
        filename: Optional[str] = None
    ) -> Optional[go.Figure]:
        """
        Generate an interactive Plotly animation.

        Parameters
        ----------
        skip_frames : int, default=10
            Temporal subsampling factor.
        skip_spatial : int, default=4
            Spatial subsampling factor.
        filename : str, optional
            If provided, saves the animation as an HTML file.

        Returns
        -------
        go.Figure or None
            Plotly figure with animation controls, or None if no data.
        """
        if skip_frames < 1 or skip_spatial < 1:
            raise ValueError("skip_frames and skip_spatial must be positive integers.")

        if not self.history:
            print("No data! Run .run() first.")
            return None

        s_slice = slice(None, None, skip_spatial)
        display_data = [frame[s_slice, s_slice] for frame in self.history[::skip_frames]]
        labels = self.step_numbers[::skip_frames]

        stack = np.array(display_data)
        bound = np.nanmax(np.abs(stack)) if np.any(np.isfinite(stack)) else 0.0
        if not bound:
            bound = 1.0
            print("Warning: Simulation appears to be flat (min == max).")
        else:
            print(f"Dynamic Scale Found: [{-bound:.2e}, {bound:.2e}]")

        print(f'Animating {len(display_data)} frames (Spatial stride: {skip_spatial})...')

        domain = self.solver.domain
        x_plot = np.arange(domain.width)[s_slice]
        y_plot = np.arange(domain.height)[s_slice]

        initial_data = [go.Heatmap(
            x=x_plot, y=y_plot, z=display_data[0],
            colorscale='RdBu', zmin=-bound, zmax=bound, zmid=0.0,
            name="Wave"
        )]

        listeners = domain.listeners
        if listeners:
            initial_data.append(go.Scatter(
                x=[l.pos[0] for l in listeners], y=[l.pos[1] for l in listeners],
                mode="markers", name="Listener",
                marker=dict(color='black', size=8, symbol='x')
            ))

        frames = [
            go.Frame(data=[go.Heatmap(z=frame)], name=f"f{i}", traces=[0])
            for i, frame in enumerate(display_data)
        ]

        layout_settings = go.Layout(
            title=f"2D Wave (Range: {-bound:.2e} to {bound:.2e}, {labels[-1]} steps)",
            xaxis=dict(title="x [cell]"),
            yaxis=dict(title="y [cell]", autorange='reversed', scaleanchor='x'),
            template="plotly_white"
        )

        layout_settings.updatemenus = [dict(
            type="buttons", showactive=False,
            x=0.1, y=0, xanchor="right", yanchor="top", pad=dict(t=0, r=10),
            buttons=[
                dict(label="▶ Play", method="animate",
                     args=[None, dict(frame=dict(duration=20, redraw=True), fromcurrent=True)]),
                dict(label="|| Pause", method="animate",
                     args=[[None], dict(frame=dict(duration=0, redraw=False), mode="immediate", transition=dict(duration=0))])
            ]
        )]

        fig = go.Figure(data=initial_data, layout=layout_settings)
        fig.frames = frames

        if filename:
            fig.write_html(filename)
            print(f"✅ Animation saved to {filename}")

        return fig
