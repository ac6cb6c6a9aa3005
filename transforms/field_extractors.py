"""
Field extraction utilities for Trello cards
"""
from typing import List, Optional, Sequence

from config import (
    COMPLETE_CHECK_ITEM_STATE,
    DESCRIPTION_SOURCE_PREFIX,
    DESCRIPTION_ATTACHMENT_PREFIX,
    LABEL_SEPARATOR
)
from models import Card, CheckItem, StoryState, TaskStatus
from transforms.board_index import BoardIndex


def extract_title(card: Card) -> str:
    return card.name


def extract_description(card: Card) -> str:
    """Card description followed by a link to the card and one line per attachment"""
    description = card.desc
    description += f"\n\n{DESCRIPTION_SOURCE_PREFIX}{card.url}"
    for attachment_url in card.attachments:
        description += f"\n\n{DESCRIPTION_ATTACHMENT_PREFIX}{attachment_url}"
    return description


def extract_label_names(card: Card, index: BoardIndex) -> List[str]:
    """Label names in card order, skipping labels without a name or unknown ids"""
    names = []
    for label_id in card.id_labels:
        name = index.label_name(label_id)
        if name:
            names.append(name)
    return names


def extract_labels(card: Card, index: BoardIndex) -> str:
    return LABEL_SEPARATOR.join(extract_label_names(card, index))


def extract_created_at(card: Card, state: StoryState) -> str:
    """Last activity timestamp for stories that are not yet accepted"""
    return '' if state == StoryState.ACCEPTED else card.date_last_activity


def extract_accepted_at(card: Card, state: StoryState) -> str:
    """Last activity timestamp for accepted stories"""
    return card.date_last_activity if state == StoryState.ACCEPTED else ''


def task_at(tasks: Sequence[CheckItem], slot: int) -> Optional[CheckItem]:
    """Check item in a 1-based task slot, None past the end"""
    if 1 <= slot <= len(tasks):
        return tasks[slot - 1]
    return None


def extract_task_name(item: Optional[CheckItem]) -> str:
    return item.name if item is not None else ''


def extract_task_status(item: Optional[CheckItem]) -> str:
    if item is None:
        return ''
    if item.state.lower().strip() == COMPLETE_CHECK_ITEM_STATE:
        return TaskStatus.COMPLETED.value
    return TaskStatus.NOT_COMPLETED.value
