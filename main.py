"""
Main entry point for Trello to Pivotal Tracker conversion script
"""
import sys
import logging
import argparse

from models import ConversionSummary
from exporters import TrelloExportError, load_board
from transforms import BoardIndex, transform_board
from importers import write_pivotal_csv
from utils import logger, enable_file_logging, set_console_level
from config import USAGE


def run(source_path: str, target_path: str) -> ConversionSummary:
    """
    Convert one Trello board export into one Pivotal Tracker CSV file

    Args:
        source_path: Trello .json export to read
        target_path: Pivotal Tracker .csv file to write

    Returns:
        ConversionSummary of the run

    Raises:
        TrelloExportError: if the export cannot be read, parsed or is incomplete
        OSError: if the CSV cannot be written
    """
    summary = ConversionSummary()

    logger.info(f"\n{'='*60}")
    logger.info("PHASE 1: READ TRELLO EXPORT")
    logger.info(f"{'='*60}")
    board = load_board(source_path)
    logger.info(f"✓ Loaded board with {len(board.cards)} cards")

    logger.info(f"\n{'='*60}")
    logger.info("PHASE 2: TRANSFORM DATA")
    logger.info(f"{'='*60}")
    index = BoardIndex.from_board(board)
    header, rows = transform_board(board, summary, index=index)

    # Rows are derived lazily while the CSV is written
    logger.info(f"\n{'='*60}")
    logger.info("PHASE 3: WRITE PIVOTAL TRACKER CSV")
    logger.info(f"{'='*60}")
    write_pivotal_csv(target_path, header, rows)

    summary.print_summary()
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='trello2pivotal',
        description='Convert a Trello board export (.json) into a Pivotal Tracker import file (.csv)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  trello2pivotal board.json stories.csv
  python main.py board.json stories.csv --debug
        """
    )
    parser.add_argument('source', help='Path to read the Trello export .JSON file')
    parser.add_argument('target', help='Path to write the Pivotal Tracker .CSV file')
    parser.add_argument('-d', '--debug', action='store_true', help='Show debug output on the console')
    return parser


def main(argv=None):
    """Main execution function"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.source.strip():
        parser.error("Must specify path to read Trello .JSON file.")
    if not args.target.strip():
        parser.error("Must specify path to write Pivotal Tracker .CSV file.")

    enable_file_logging()
    if args.debug:
        set_console_level(logging.DEBUG)

    logger.info("\n-=[ trello2pivotal ]=-\n")

    try:
        summary = run(args.source, args.target)
    except TrelloExportError as e:
        logger.error(f"Error! {e}")
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        logger.error(f"Error! Could not write Pivotal Tracker .CSV file {args.target}: {e}")
        sys.exit(1)

    print(f"Wrote {summary.cards_converted} rows to CSV file.")


if __name__ == '__main__':
    main()
