import argparse

from wavesim.core import BoundaryPolicy
from wavesim.scenarios import SCENARIOS
from wavesim.visualization import PhysicsAnimator


def positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="wavesim",
        description="Run a 2D wave scenario and save it as an HTML animation."
    )
    parser.add_argument("scenario", choices=sorted(SCENARIOS), help="preset to run")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--policy", choices=[p.value for p in BoundaryPolicy], default="wall",
                        help="boundary policy for edges and walls")
    parser.add_argument("--steps", type=positive_int, default=300)
    parser.add_argument("--every", type=positive_int, default=5, help="keep one frame every N steps")
    parser.add_argument("--stride", type=positive_int, default=4, help="spatial subsampling of frames")
    parser.add_argument("--out", default="wave.html", help="output HTML file")
    args = parser.parse_args(argv)

    solver = SCENARIOS[args.scenario](width=args.width, height=args.height,
                                      boundary_policy=args.policy)

    animator = PhysicsAnimator(solver, args.steps)
    animator.run(every=args.every)
    animator.create_animation(skip_frames=1, skip_spatial=args.stride, filename=args.out)


if __name__ == "__main__":
    main()
