"""
Lookup tables built once from a Trello board before any row is derived
"""
from types import MappingProxyType
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, TypeVar

from models import Board, Checklist, Label, TrelloList
from transforms.task_aggregator import max_task_slots as count_task_slots
from utils import logger

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


def index_by(records: Iterable[V], key_fn: Callable[[V], K]) -> Dict[K, V]:
    """
    Build a lookup dictionary from a sequence of records

    Args:
        records: Records to index
        key_fn: Function returning the key of a record

    Returns:
        Dictionary of records keyed by key_fn(record), in source order.
        A later record with a duplicate key replaces the earlier one.
    """
    return {key_fn(record): record for record in records}


class BoardIndex:
    """
    Read-only lookups over a board: labels, lists and checklists by id, and
    checklists grouped by the card that owns them
    """

    def __init__(self, labels: Mapping[str, Label], lists: Mapping[str, TrelloList],
                 checklists: Mapping[str, Checklist]):
        self.labels = MappingProxyType(dict(labels))
        self.lists = MappingProxyType(dict(lists))
        self.checklists = MappingProxyType(dict(checklists))

        # card id -> checklists owning that card, in checklist index order
        by_card: Dict[str, List[Checklist]] = {}
        for checklist in self.checklists.values():
            by_card.setdefault(checklist.id_card, []).append(checklist)
        self._checklists_by_card = MappingProxyType({
            card_id: tuple(owned) for card_id, owned in by_card.items()
        })
        self._max_task_slots: Optional[int] = None

    @classmethod
    def from_board(cls, board: Board) -> 'BoardIndex':
        labels = index_by(board.labels, lambda label: label.id)
        logger.info(f"Did cache {len(labels)} labels.")
        lists = index_by(board.lists, lambda lst: lst.id)
        logger.info(f"Did cache {len(lists)} lists.")
        checklists = index_by(board.checklists, lambda checklist: checklist.id)
        logger.info(f"Did cache {len(checklists)} checklists.")
        return cls(labels, lists, checklists)

    def label_name(self, label_id: str) -> str:
        """Name of a label, '' when the id does not resolve"""
        label = self.labels.get(label_id)
        return label.name if label else ''

    def list_for(self, list_id: str) -> Optional[TrelloList]:
        return self.lists.get(list_id)

    def checklists_for_card(self, card_id: str) -> Tuple[Checklist, ...]:
        return self._checklists_by_card.get(card_id, ())

    @property
    def max_task_slots(self) -> int:
        """Board-wide number of Task/Task Status column pairs, computed once"""
        if self._max_task_slots is None:
            self._max_task_slots = count_task_slots(self.checklists.values())
            logger.info(f"Will allocate {self._max_task_slots} Task/Task Status column pairs.")
        return self._max_task_slots
