import argparse
import logging
import sys
from dataclasses import replace

from pdf_digest.config import load_config
from pdf_digest.errors import ConfigError, ResultsWriteError
from pdf_digest.logging_config import setup_logging
from pdf_digest.pipeline.batching import shuffle_order
from pdf_digest.pipeline.orchestrator import run_digest

logger = logging.getLogger("pdf_digest.run")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-digest",
        description="Summarize a directory of PDF articles in small subject groups.",
    )
    parser.add_argument("--pdfs-dir", help="override PDFS_DIR")
    parser.add_argument("--results-file", help="override RESULTS_FILE")
    parser.add_argument("--batch-size", type=int, help="override BATCH_SIZE")
    parser.add_argument("--seed", type=int, help="seed the file shuffle for a reproducible order")
    parser.add_argument("--env-file", help="path to a .env file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging()

    try:
        config = load_config(args.env_file)

        #apply overrides
        overrides = {}
        if args.pdfs_dir:
            overrides["pdfs_dir"] = args.pdfs_dir
        if args.results_file:
            overrides["results_file"] = args.results_file
        if args.batch_size is not None:
            if args.batch_size < 1:
                raise ConfigError(f"--batch-size must be at least 1, got {args.batch_size}")
            overrides["batch_size"] = args.batch_size
        config = replace(config, **overrides)

        setup_logging(config.log_level)

        run_digest(config, order=shuffle_order(args.seed))

    except ConfigError as exc:
        logger.error("%s", exc)
        return 1
    except ResultsWriteError as exc:
        logger.error("Error saving results: %s", exc.cause)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
