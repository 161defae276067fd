"""Pendulum Wave Simulation."""

import argparse
import logging

from config import SPHERE_PALETTES, WaveConfig
from logging_config import setup_logging
from pendulum_wave import PendulumWave


def frame_count(value):
    frames = int(value)
    if frames < 1:
        raise argparse.ArgumentTypeError(f"need at least one frame, got {frames}")
    return frames


def parse_args(argv=None):
    defaults = WaveConfig()
    parser = argparse.ArgumentParser(description="Animated pendulum wave")
    parser.add_argument("--count", type=int, default=defaults.count)
    parser.add_argument("--length", type=float, default=defaults.length)
    parser.add_argument("--spacing", type=float, default=defaults.spacing)
    parser.add_argument("--phase-step", type=float, default=defaults.phase_step)
    parser.add_argument("--palette", choices=sorted(SPHERE_PALETTES), default=defaults.palette)
    parser.add_argument("--detail", type=float, default=None,
                        help="mesh detail in (0, 1]; defaults depend on the backend")
    parser.add_argument("--backend", choices=["matplotlib", "bullet"], default="matplotlib")
    parser.add_argument("--analyze", type=frame_count, metavar="FRAMES",
                        help="run headless for FRAMES frames and plot the result")
    parser.add_argument("--save", metavar="FILE", help="where to save the analysis plot")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args):
    if args.detail is not None:
        detail = args.detail
    elif args.backend == "matplotlib" or args.analyze is not None:
        detail = 0.25
    else:
        detail = 0.5
    return WaveConfig(
        count=args.count,
        length=args.length,
        spacing=args.spacing,
        phase_step=args.phase_step,
        palette=args.palette,
        detail=detail,
    )


def main(argv=None):
    """Main entry point for the Pendulum Wave Simulation."""
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))
    print("\n=== Pendulum Wave Simulation ===")

    config = build_config(args)
    wave = PendulumWave(config)

    if args.analyze is not None:
        from analysis import create_wave_plot
        history = wave.run(args.analyze)
        create_wave_plot(history, filename=args.save or "pendulum_wave.png")
        return history

    if args.backend == "bullet":
        from bullet_scene import run_bullet
        run_bullet(wave)
    else:
        from visualization import WaveAnimation
        WaveAnimation(wave).main_loop()


if __name__ == "__main__":
    main()
