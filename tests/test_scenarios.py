import numpy as np
import matplotlib
import matplotlib.pyplot as plt
import pytest

from wavesim.__main__ import main
from wavesim.core import BoundaryPolicy, GridDomain
from wavesim.scenarios import parabolic_wedge_scenario, open_field_scenario
from wavesim.solvers import Wave
from wavesim.visualization import PhysicsAnimator, field_to_rgb, preview_domain
from wavesim.components import HarmonicSource, Listener
from wavesim.utils.builders import rectangle


def test_wedge_scenario_defaults(clock):
    w = parabolic_wedge_scenario(clock=clock)
    domain = w.domain

    assert (domain.width, domain.height) == (640, 480)
    assert w.c2 == 0.5 and w.dx2 == 1.0 and w.dt2 == 1.0
    assert w.boundary_policy is BoundaryPolicy.WALL
    assert domain.wall_count > 0

    (source,) = domain.sources
    assert source.pos == (640 // 16, 240)
    assert domain.index(*source.pos) == (480 // 2) * 640 + 640 // 16
    assert (source.amplitude, source.angular_rate, source.phase_offset) == (20.0, 10.0, -0.5)
    assert not domain.is_wall[source.injection_points[0]]


def test_open_scenario_defaults(clock):
    w = open_field_scenario(width=64, height=48, clock=clock)
    domain = w.domain

    assert domain.wall_count == 0
    assert w.c2 == 0.1
    (source,) = domain.sources
    assert source.pos == (0, 24)
    assert (source.amplitude, source.angular_rate, source.phase_offset) == (30.0, 1.0, -0.1)


def test_scenario_accepts_policy_name(clock):
    w = open_field_scenario(16, 12, boundary_policy="anti", clock=clock)
    assert w.boundary_policy is BoundaryPolicy.ANTI


def test_zero_size_falls_back_to_default(clock):
    w = open_field_scenario(width=0, height=0, clock=clock)
    assert w.domain.shape == (480, 640)


@pytest.mark.parametrize("scenario", [parabolic_wedge_scenario, open_field_scenario])
def test_presets_stay_finite(scenario, clock):
    w = scenario(64, 48, clock=clock)

    for _ in range(200):
        clock.advance(1 / 60)
        w.step()

    field = w.snapshot().field
    assert np.all(np.isfinite(field))
    assert np.abs(field).max() < 1e4


def test_field_to_rgb_colours(clock):
    domain = GridDomain(4, 3, geometry=rectangle(0, 0, 1, 3))
    w = Wave(domain, clock=clock)
    w.buffers.curr[1, 2] = 50.0
    w.buffers.curr[1, 3] = -50.0

    rgb = field_to_rgb(w.snapshot())
    cmap = matplotlib.colormaps['RdBu']

    assert rgb.shape == (3, 4, 3) and rgb.dtype == np.uint8
    assert (rgb[:, 0] == 0).all()
    np.testing.assert_array_equal(rgb[0, 1], cmap(0.5, bytes=True)[:3])
    np.testing.assert_array_equal(rgb[1, 2], cmap(1.0, bytes=True)[:3])
    np.testing.assert_array_equal(rgb[1, 3], cmap(0.0, bytes=True)[:3])


def test_animator_collects_frames(tmp_path, clock):
    w = open_field_scenario(16, 12, clock=clock)
    animator = PhysicsAnimator(w, n_steps=10)
    assert animator.create_animation() is None

    animator.run(every=2)
    assert animator.step_numbers == [2, 4, 6, 8, 10]

    out = tmp_path / "wave.html"
    fig = animator.create_animation(skip_frames=1, skip_spatial=2, filename=str(out))
    assert len(fig.frames) == 5
    assert out.exists()


def test_cli_writes_animation(tmp_path):
    out = tmp_path / "cli.html"
    main(["wedge", "--width", "32", "--height", "24", "--steps", "6",
          "--every", "2", "--stride", "1", "--out", str(out)])
    assert out.exists()


def test_animator_rejects_non_positive_strides(clock):
    animator = PhysicsAnimator(open_field_scenario(8, 6, clock=clock), n_steps=2)
    with pytest.raises(ValueError):
        animator.run(every=0)

    animator.run(every=1)
    with pytest.raises(ValueError):
        animator.create_animation(skip_spatial=0)
    with pytest.raises(ValueError):
        animator.create_animation(skip_frames=0)


@pytest.mark.parametrize("flag", ["--every", "--stride", "--steps"])
def test_cli_rejects_zero(flag, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["open", "--width", "8", "--height", "6", flag, "0",
              "--out", str(tmp_path / "never.html")])
    assert exc.value.code == 2
    assert not (tmp_path / "never.html").exists()


def test_preview_domain_draws_mask_and_markers():
    domain = GridDomain(10, 8, geometry=rectangle(0, 0, 2, 8))
    domain.add_source(HarmonicSource((5, 4)))
    domain.add_listener(Listener((8, 4)))

    fig = preview_domain(domain, show=False)

    (ax,) = fig.axes
    assert ax.images[0].get_array().shape == (8, 10)
    assert len(ax.lines) == 2
    assert "20 wall cells" in ax.get_title()
    plt.close(fig)
