import sys
import logging
import argparse
from pathlib import Path

from tqdm import tqdm

from imglift_upload.config import Config
from imglift_upload.pipeline import create_orchestrator
from imglift_upload.services.vault import MarkdownDocument
from imglift_upload.exceptions import ImgliftError, InvalidInputError

# Logger
logger = logging.getLogger(__name__)


# Helpers
def _build_overrides(args: argparse.Namespace) -> dict:
    overrides = {}
    if args.vault:
        overrides["vault_root"] = args.vault
    if args.endpoint:
        overrides["api_endpoint"] = args.endpoint
    return overrides


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Upload local images referenced in a markdown file and rewrite the links"
    )
    parser.add_argument("file", nargs="?", help="Markdown file to process")
    parser.add_argument("-s", "--start", type=int, default=0, help="First line (0-based)")
    parser.add_argument("-e", "--end", type=int, help="Last line (inclusive)")
    parser.add_argument("--vault", help="Vault root directory")
    parser.add_argument("--endpoint", help="Upload endpoint URL")
    parser.add_argument("-u", "--upload", metavar="PATH", help="Upload a single image and print its URL")
    parser.add_argument("--dry-run", action="store_true", help="Process without saving the file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _upload_single(orchestrator, path: str) -> int:
    buffer = MarkdownDocument(Path("<selection>"), path)
    url = orchestrator.upload_selection(buffer, path)
    if url is None:
        return 2
    print(url)
    return 0


def _process_file(orchestrator, args: argparse.Namespace) -> int:
    document = MarkdownDocument.load(args.file)

    result = orchestrator.run(
        document,
        args.start,
        args.end,
        progress_wrapper=lambda lines: tqdm(lines, desc="Scanning lines", unit="line", leave=False),
    )

    if document.modified and not args.dry_run:
        document.save()

    print("\n" + "=" * 50)
    print("UPLOAD COMPLETE" + (" (dry run)" if args.dry_run else ""))
    print("=" * 50)
    for key, value in result.as_dict().items():
        print(f"  {key}: {value}")

    return 0


# Execution
def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-7s | %(message)s",
        datefmt="%H:%M:%S"
    )

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.file and not args.upload:
        parser.error("either FILE or --upload PATH is required")

    try:
        config = Config(**_build_overrides(args))

        with create_orchestrator(config) as orchestrator:
            if args.upload:
                return _upload_single(orchestrator, args.upload)
            return _process_file(orchestrator, args)

    except KeyboardInterrupt:
        logger.info("\nInterrupted by user")
        return 130
    except InvalidInputError as e:
        logger.error(f"Input error: {e}")
        return 2
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 5
    except ImgliftError as e:
        logger.error(f"Upload error: {e}")
        return 6
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
