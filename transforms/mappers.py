"""
Mapping functions for Trello labels and lists to Pivotal Tracker story types and states
"""
from typing import Optional

from config import (
    BUG_LABELS,
    CHORE_LABELS,
    ACCEPTED_LIST_KEYWORDS,
    REVIEW_LIST_KEYWORDS,
    STARTED_LIST_KEYWORDS,
    UNSTARTED_LIST_KEYWORDS,
    UNSCHEDULED_LIST_KEYWORDS
)
from models import Card, StoryState, StoryType, TrelloList
from transforms.board_index import BoardIndex


def normalize(text: Optional[str]) -> str:
    return (text or '').lower().strip()


def map_story_type(card: Card, index: BoardIndex) -> StoryType:
    """
    Infer the story type of a card from its labels

    Labels are checked in card order and each match overwrites the previous
    result, so the last matching label decides (["Tech Debt", "Bug"] is a Bug).
    """
    story_type = StoryType.FEATURE
    for label_id in card.id_labels:
        name = normalize(index.label_name(label_id))
        if not name:
            continue
        if name in BUG_LABELS:
            story_type = StoryType.BUG
        if name in CHORE_LABELS:
            story_type = StoryType.CHORE
    return story_type


def map_list_state(trello_list: Optional[TrelloList], story_type: StoryType) -> Optional[StoryState]:
    """Map a list to a state by its name, None when the list says nothing"""
    if trello_list is None:
        return None

    list_name = trello_list.name.lower()

    if any(keyword in list_name for keyword in ACCEPTED_LIST_KEYWORDS):
        return StoryState.ACCEPTED
    elif trello_list.closed:
        return StoryState.ACCEPTED
    elif any(keyword in list_name for keyword in REVIEW_LIST_KEYWORDS):
        # Chores are never delivered
        return StoryState.STARTED if story_type == StoryType.CHORE else StoryState.DELIVERED
    elif any(keyword in list_name for keyword in STARTED_LIST_KEYWORDS):
        return StoryState.STARTED
    elif any(keyword in list_name for keyword in UNSTARTED_LIST_KEYWORDS):
        return StoryState.UNSTARTED
    elif any(keyword in list_name for keyword in UNSCHEDULED_LIST_KEYWORDS):
        return StoryState.UNSCHEDULED

    return None


def map_current_state(card: Card, index: BoardIndex, story_type: StoryType) -> StoryState:
    """
    Infer the workflow state of a card from the list it sits in

    Falls back to the card itself (archived cards are Accepted, everything
    else Unscheduled) when the list is unknown or its name matches no keyword.
    """
    state = map_list_state(index.list_for(card.id_list), story_type)
    if state is not None:
        return state
    return StoryState.ACCEPTED if card.closed else StoryState.UNSCHEDULED
