"""
Checklist items flattened into Pivotal Tracker tasks

A card can own several checklists, so the number of task slots a card needs
is the sum of its checklists' item counts, not the size of its largest
checklist.
"""
from typing import TYPE_CHECKING, Dict, Iterable, List

from models import Card, CheckItem, Checklist

if TYPE_CHECKING:
    from transforms.board_index import BoardIndex


def tasks_for_card(card: Card, index: 'BoardIndex') -> List[CheckItem]:
    """
    All check items of a card, across every checklist it owns

    Checklists are visited in board index order and items keep their order
    within each checklist.
    """
    items: List[CheckItem] = []
    for checklist in index.checklists_for_card(card.id):
        items.extend(checklist.check_items)
    return items


def max_task_slots(checklists: Iterable[Checklist]) -> int:
    """
    Largest total number of check items owned by any single card

    Args:
        checklists: Every checklist on the board

    Returns:
        Maximum over cards of the summed item counts, 0 when there are no checklists
    """
    card_totals: Dict[str, int] = {}
    for checklist in checklists:
        card_totals[checklist.id_card] = card_totals.get(checklist.id_card, 0) + len(checklist.check_items)

    return max(card_totals.values(), default=0)
