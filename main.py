import logging
import colorlog
import argparse
import json
import sys
from typing import List, Optional, Tuple
from casteljau import BezierEngine, CurveConfig, InvalidInput, random_control_points

handler = colorlog.StreamHandler()
handler.setFormatter(colorlog.ColoredFormatter(
    '%(blue)s[%(asctime)s]%(reset)s %(log_color)s[%(levelname)s]%(reset)s %(purple)s[%(filename)s:%(lineno)d]%(reset)s: %(message)s',
    datefmt='%H:%M:%S',
    log_colors={
        'DEBUG': 'cyan',
        'INFO': 'green',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'CRITICAL': 'red,bg_white',
    },
    style='%'
))

logger = logging.getLogger()
logger.setLevel(logging.INFO)
logger.handlers = [handler]


def parse_point(value: str) -> Tuple[float, float]:
    try:
        x, y = value.split(",")
        return float(x), float(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a point as x,y, got {value!r}")


def sample_curve(config: CurveConfig, control: Optional[List[Tuple[float, float]]] = None) -> dict:
    if control is None:
        control = random_control_points(
            config.point_count,
            rng=config.make_rng(),
            low=config.coordinate_low,
            high=config.coordinate_high
        )
    engine = BezierEngine(control)
    polyline = engine.sample_curve(config.step_count)
    logging.info(f"Sampled order {engine.order} curve into {len(polyline)} points, length {polyline.get_length():.2f}")
    return {
        "control_points": engine.control_points.tolist(),
        "samples": polyline.points.tolist(),
        "length": polyline.get_length()
    }


def evaluate_curve(control: List[Tuple[float, float]], params: List[float]) -> List[dict]:
    engine = BezierEngine(control)
    results = []
    for t in params:
        if not 0.0 <= t <= 1.0:
            logging.warning(f"t={t} is outside [0, 1], returning the extrapolated point")
        x, y = engine.evaluate_at(t)
        results.append({"t": t, "x": float(x), "y": float(y)})
    return results


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Bezier curves evaluated with the de Casteljau algorithm')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    sample_parser = subparsers.add_parser('sample', help='Sample a curve into a polyline')
    sample_parser.add_argument('--control', type=parse_point, nargs='+', help='Control points as x,y (random when omitted)')
    sample_parser.add_argument('--points', type=int, default=9, help='Number of random control points')
    sample_parser.add_argument('--steps', type=int, default=1000, help='Number of sampling steps')
    sample_parser.add_argument('--seed', type=int, default=None, help='Seed for random control points')
    sample_parser.add_argument('--low', type=float, default=200.0, help='Lower bound for random coordinates')
    sample_parser.add_argument('--high', type=float, default=1000.0, help='Upper bound for random coordinates')

    evaluate_parser = subparsers.add_parser('evaluate', help='Evaluate a curve at given parameters')
    evaluate_parser.add_argument('--control', type=parse_point, nargs='+', required=True, help='Control points as x,y')
    evaluate_parser.add_argument('--t', type=float, nargs='+', required=True, help='Curve parameters')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        if args.command == 'sample':
            config = CurveConfig(
                step_count=args.steps,
                point_count=args.points,
                coordinate_low=args.low,
                coordinate_high=args.high,
                seed=args.seed
            )
            print(json.dumps(sample_curve(config, args.control), allow_nan=False))
        elif args.command == 'evaluate':
            lines = [json.dumps(result, allow_nan=False) for result in evaluate_curve(args.control, args.t)]
            print("\n".join(lines))
        else:
            logger.error("Please specify a command. Use --help for more information.")
            return 2
    except InvalidInput as e:
        logger.error(f"{e}")
        return 2
    except ValueError as e:
        logger.error(f"Curve has non-finite coordinates: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
