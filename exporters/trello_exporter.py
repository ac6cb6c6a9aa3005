"""
Read a Trello board export (.json) from disk
"""
import json
from typing import Dict

from config import REQUIRED_COLLECTIONS
from models import Board
from utils import logger


class TrelloExportError(Exception):
    """The Trello export could not be read, parsed or is missing required data"""


def read_content(path: str) -> bytes:
    """
    Read the raw bytes of a Trello export file

    Raises:
        TrelloExportError: if the file cannot be read or is empty
    """
    try:
        with open(path, 'rb') as f:
            content = f.read()
    except OSError as e:
        raise TrelloExportError(f"Could not read Trello .JSON file {path}: {e}") from e

    if not content:
        raise TrelloExportError(f"Trello .JSON file was empty: {path}")

    logger.info(f"Did read {len(content)} bytes from Trello .JSON file: {path}")
    return content


def parse_json(content: bytes) -> Dict:
    """
    Parse Trello export content into a dictionary

    Raises:
        TrelloExportError: if the content is not a valid JSON object
    """
    try:
        data = json.loads(content)
    except ValueError as e:
        raise TrelloExportError(f"Trello board input was not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise TrelloExportError(f"Trello board input must be a JSON object, got {type(data).__name__}")

    logger.info("Did parse Trello board from JSON.")
    return data


def validate_board(data: Dict):
    """Make sure every collection the conversion relies on is present and holds objects"""
    missing = [name for name in REQUIRED_COLLECTIONS if not isinstance(data.get(name), list)]
    if missing:
        raise TrelloExportError(f"Trello board is missing required collections: {', '.join(missing)}")

    for name in REQUIRED_COLLECTIONS:
        for position, element in enumerate(data[name]):
            if not isinstance(element, dict):
                raise TrelloExportError(
                    f"Trello board {name}[{position}] must be a JSON object, got {type(element).__name__}"
                )


def show_board_details(board: Board):
    logger.info("Trello Board Details:")
    for key, value in board.details.items():
        if isinstance(value, str):
            logger.info(f"  {key}: {value}")
        else:
            logger.info(f"  {key}({value})")


def load_board(path: str) -> Board:
    """
    Load a Trello board export

    Args:
        path: Path of the Trello .json export

    Returns:
        Board built from the export

    Raises:
        TrelloExportError: on unreadable, empty, malformed or incomplete exports
    """
    data = parse_json(read_content(path))
    validate_board(data)
    board = Board.from_dict(data)
    show_board_details(board)
    return board
