import argparse
import logging
import sys

from config import settings
from services.batch_service import BatchService
from services.errors import QrExportError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totp-qr-export",
        description="Generate one otpauth:// QR code PNG per entry of a TOTP JSON export."
    )
    parser.add_argument("input_file", nargs="?", help=f"JSON export file (default {settings.INPUT_FILE})")
    parser.add_argument("-o", "--output-dir", default=settings.OUTPUT_DIR,
                        help=f"Directory for the PNG files (default {settings.OUTPUT_DIR})")
    parser.add_argument("--strict-secrets", action="store_true",
                        default=not settings.ALLOW_SHORT_SECRETS,
                        help="Reject secrets shorter than 80 bits instead of exporting them as-is")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log secret lengths and other details")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.getLevelName(settings.LOG_LEVEL)
    if not isinstance(level, int):
        print(f"Unknown LOG_LEVEL: {settings.LOG_LEVEL}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S"
    )

    input_file = args.input_file
    if input_file is None:
        input_file = settings.INPUT_FILE
        logger.info("Usage: %s <JSON file>", parser.prog)
        logger.info("Or run without arguments to use the default file: %s", input_file)

    logger.info("Reading file: %s", input_file)
    try:
        BatchService.run(input_file, args.output_dir, allow_short_secrets=not args.strict_secrets)
    except QrExportError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
