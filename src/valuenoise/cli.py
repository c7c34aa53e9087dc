"""Command-line interface for noise generation."""

import argparse
import time
import tomllib
from pathlib import Path

import structlog
from pydantic import ValidationError


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for noise generation."""
    parser = argparse.ArgumentParser(
        description="Generate multi-octave 2D value noise"
    )
    parser.add_argument(
        "--config", type=str, default=None, help="TOML config file with a [noise] table"
    )
    parser.add_argument("--width", type=int, default=None, help="Field width")
    parser.add_argument("--height", type=int, default=None, help="Field height")
    parser.add_argument(
        "--interpolation",
        choices=["linear", "cubic"],
        default=None,
        help="Interpolation kernel",
    )
    parser.add_argument(
        "--wavelength", type=int, default=None, help="Lattice spacing of the first octave"
    )
    parser.add_argument("--octaves", type=int, default=None, help="Number of octaves")
    parser.add_argument(
        "--factor", type=float, default=None, help="Amplitude multiplier per octave"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--workers", type=int, default=1, help="Threads for octave evaluation (default: 1)"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="noise.npz",
        help="Output path (default: noise.npz)",
    )
    parser.add_argument(
        "--image", type=str, default=None, help="Also write a grayscale PNG preview"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(10 if args.verbose else 20),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from .config import Config, NoiseConfig, load_config
    from .exceptions import NoiseError
    from .field import ValueNoiseField
    from .persistence import save_field, save_preview

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            logger.error("config_not_found", path=args.config)
            raise SystemExit(1)
        try:
            config = load_config(config_path)
        except (ValidationError, tomllib.TOMLDecodeError) as e:
            logger.error("invalid_config", path=str(config_path), error=str(e))
            raise SystemExit(1)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = Config()

    # Apply CLI overrides
    overrides = {
        name: getattr(args, name)
        for name in ("width", "height", "interpolation", "wavelength", "octaves", "factor", "seed")
        if getattr(args, name) is not None
    }
    try:
        noise_config = NoiseConfig.model_validate(config.noise.model_dump() | overrides)
    except ValidationError as e:
        logger.error("invalid_config", error=str(e))
        raise SystemExit(1)

    logger.info(
        "generating_field",
        width=noise_config.width,
        height=noise_config.height,
        interpolation=noise_config.interpolation.value,
        wavelength=noise_config.wavelength,
        octaves=noise_config.octaves,
        seed=noise_config.seed,
    )

    start_time = time.time()
    try:
        field = ValueNoiseField.from_config(noise_config, workers=args.workers)
    except NoiseError as e:
        logger.error("generation_failed", error=str(e))
        raise SystemExit(1)
    logger.info("generation_complete", seconds=round(time.time() - start_time, 2))

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    save_field(output_path, field, noise_config)

    if args.image:
        image_path = Path(args.image)
        image_path.parent.mkdir(parents=True, exist_ok=True)
        save_preview(image_path, field.to_array())


if __name__ == "__main__":
    main()
