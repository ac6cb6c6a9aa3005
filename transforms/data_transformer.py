"""
Row assembly: turn every Trello card into one Pivotal Tracker CSV row

Pivotal Tracker CSV columns:
- Title, Type, Description, Labels, Current State, Created at, Accepted at, Estimate
- then one "Task", "Task Status" pair per task slot. The pair names repeat
  for every slot, which is how Pivotal Tracker expects them.

The number of task slots is board-wide (see transforms.task_aggregator), so
every row has the same width whatever the number of tasks on its card.
"""
from typing import Iterator, List, Optional, Tuple

from config import FIXED_COLUMNS, TASK_COLUMN, TASK_STATUS_COLUMN, DEFAULT_ESTIMATE
from models import Board, Card, ConversionSummary, PivotalRow
from utils import logger
from transforms.board_index import BoardIndex
from transforms.task_aggregator import tasks_for_card
from transforms.mappers import map_story_type, map_current_state
from transforms.field_extractors import (
    extract_title,
    extract_description,
    extract_labels,
    extract_created_at,
    extract_accepted_at,
    extract_task_name,
    extract_task_status,
    task_at
)


def build_header(max_task_slots: int) -> List[str]:
    """Column names: the fixed columns then one Task/Task Status pair per slot"""
    header = list(FIXED_COLUMNS)
    for _ in range(max_task_slots):
        header.append(TASK_COLUMN)
        header.append(TASK_STATUS_COLUMN)
    return header


def derive_row(card: Card, index: BoardIndex) -> PivotalRow:
    """Derive every Pivotal Tracker field of a card"""
    story_type = map_story_type(card, index)
    state = map_current_state(card, index, story_type)

    return PivotalRow(
        title=extract_title(card),
        story_type=story_type,
        description=extract_description(card),
        labels=extract_labels(card, index),
        current_state=state,
        created_at=extract_created_at(card, state),
        accepted_at=extract_accepted_at(card, state),
        estimate=DEFAULT_ESTIMATE,
        tasks=tuple(tasks_for_card(card, index))
    )


def flatten_row(row: PivotalRow, max_task_slots: int) -> List[str]:
    """Column values of a derived row, in header order"""
    values = [
        row.title,
        row.story_type.value,
        row.description,
        row.labels,
        row.current_state.value,
        row.created_at,
        row.accepted_at,
        str(row.estimate),
    ]
    for slot in range(1, max_task_slots + 1):
        item = task_at(row.tasks, slot)
        values.append(extract_task_name(item))
        values.append(extract_task_status(item))
    return values


def build_row(card: Card, index: BoardIndex, max_task_slots: Optional[int] = None) -> List[str]:
    """
    Build the CSV row of one card

    Args:
        card: Trello card
        index: Board index the card belongs to
        max_task_slots: Number of task column pairs; defaults to the board-wide value

    Returns:
        List of 8 + 2 * max_task_slots column values
    """
    if max_task_slots is None:
        max_task_slots = index.max_task_slots
    return flatten_row(derive_row(card, index), max_task_slots)


def find_unresolved_references(card: Card, index: BoardIndex) -> List[str]:
    """Describe label and list ids of a card that are not on the board"""
    unresolved = []
    for label_id in card.id_labels:
        if label_id not in index.labels:
            unresolved.append(f"Card {card.id} ({card.name}): unknown label {label_id}")
    if card.id_list and card.id_list not in index.lists:
        unresolved.append(f"Card {card.id} ({card.name}): unknown list {card.id_list}")
    return unresolved


def transform_board(board: Board, summary: ConversionSummary,
                    index: Optional[BoardIndex] = None) -> Tuple[List[str], Iterator[List[str]]]:
    """
    Transform a Trello board into Pivotal Tracker CSV rows

    Args:
        board: Trello board
        summary: Conversion summary tracker
        index: Prebuilt board index (built from the board when omitted)

    Returns:
        Header row and an iterator over data rows, one per card in board order
    """
    if index is None:
        index = BoardIndex.from_board(board)

    max_task_slots = index.max_task_slots
    summary.task_slots = max_task_slots
    header = build_header(max_task_slots)
    logger.info(f"Will allocate {len(header)} column names for CSV file.")

    def rows() -> Iterator[List[str]]:
        for card in board.cards:
            for message in find_unresolved_references(card, index):
                logger.debug(message)
                summary.add_unresolved(message)

            row = derive_row(card, index)
            summary.add_row(row)
            logger.debug(f"Card {card.id}: {row.story_type.value} / {row.current_state.value} / {len(row.tasks)} tasks")
            yield flatten_row(row, max_task_slots)

    return header, rows()
