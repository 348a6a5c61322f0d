"""
Command line driver: fit a model to the numbers read from standard input.

    consensus-fit {line,aff,affn,fm} ntrials maxerr minliers [inliers] <data
"""

import argparse
import logging
import sys
import yaml

from consensus.config import load_config, merge_config
from consensus.core import ConsensusProcessor
from consensus.engine.errors import ConsensusError
from consensus.engine.ransac import as_data
from consensus.models import MODEL_CASES, get_model_case
from consensus.utils.io_handler import JSONWriter, read_ascii_floats, write_inliers
from consensus.utils.logger import create_session_log_file, setup_logger

logger = logging.getLogger(__name__)


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='consensus-fit',
        description='Fit a model to data points read from standard input using RANSAC.')
    parser.add_argument('model', help=f"model id ({', '.join(MODEL_CASES)})")
    parser.add_argument('ntrials', type=int, help='number of models to try')
    parser.add_argument('maxerr', type=float, help='maximum error of an inlier')
    parser.add_argument('minliers', type=int, help='minimum number of inliers')
    parser.add_argument('inliers', nargs='?', default=None,
                        help='file receiving the inlier points')
    parser.add_argument('--seed', type=int, default=None, help='random seed')
    parser.add_argument('--config', default=None, help='YAML configuration file')
    parser.add_argument('--json', default=None, help='write the full result to this JSON file')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=None,
                        help='logging level')
    log_target = parser.add_mutually_exclusive_group()
    log_target.add_argument('--log-file', default=None, help='also log to this file')
    log_target.add_argument('--session-log', metavar='DIR', default=None,
                            help='also log to a timestamped file in this directory')
    return parser


def main(argv=None, stdin=None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin

    log_file = args.log_file
    if args.session_log:
        log_file = create_session_log_file(args.session_log)
    setup_logger('consensus', log_level=args.log_level or 'INFO', log_file=log_file)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error(f"Could not load configuration: {e}")
        return 1
    config = merge_config(config, {
        "ransac": {
            "ntrials": args.ntrials,
            "max_error": args.maxerr,
            "min_inliers": args.minliers,
        }
    })

    level = args.log_level or str(config["logging"]["level"]).upper()
    if level not in LOG_LEVELS:
        logger.error(f"Unknown logging level in configuration: {config['logging']['level']!r}")
        return 1
    if log_file is None:
        log_file = config["logging"]["log_file"]
    setup_logger('consensus', log_level=level, log_file=log_file)

    try:
        case = get_model_case(args.model)
    except (KeyError, NotImplementedError) as e:
        logger.error(e.args[0])
        return 1

    values = read_ascii_floats(stdin)
    n = len(values) // case.datadim
    data = as_data(values[:n * case.datadim], case.datadim)

    processor = ConsensusProcessor(config)
    try:
        output = processor.process(data, case, seed=args.seed)
    except (ConsensusError, ValueError) as e:
        logger.error(f"RANSAC failed: {e}")
        return 1

    result = processor.last_result
    if result.found:
        print(f"RANSAC found a model with {result.ninliers} inliers")
        print("parameters =" + "".join(f" {p:g}" for p in result.model))
        if args.inliers:
            with open(args.inliers, 'w') as f:
                write_inliers(f, data, result.mask)
    else:
        print("RANSAC found no model")

    if args.json:
        JSONWriter.save_results(output, args.json)

    return 0


if __name__ == "__main__":
    sys.exit(main())
