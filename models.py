"""
Data models for the Trello board export and the Pivotal Tracker rows derived from it
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple
from utils import logger


class StoryType(str, Enum):
    """Pivotal Tracker story type"""
    FEATURE = 'Feature'
    BUG = 'Bug'
    CHORE = 'Chore'


class StoryState(str, Enum):
    """Pivotal Tracker workflow state"""
    UNSCHEDULED = 'Unscheduled'
    UNSTARTED = 'Unstarted'
    STARTED = 'Started'
    DELIVERED = 'Delivered'
    ACCEPTED = 'Accepted'


class TaskStatus(str, Enum):
    """Pivotal Tracker task completion status"""
    COMPLETED = 'Completed'
    NOT_COMPLETED = 'Not Completed'


def text(value) -> str:
    """Export value as text, '' for missing values"""
    return '' if value is None else str(value)


def items(value) -> List:
    """Export value as a list, [] for missing or malformed values"""
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class CheckItem:
    name: str = ''
    state: str = ''

    @classmethod
    def from_dict(cls, data: Dict) -> 'CheckItem':
        return cls(name=text(data.get('name')), state=text(data.get('state')))


@dataclass(frozen=True)
class Checklist:
    """A checklist points back at the card that owns it through id_card"""
    id: str
    id_card: str = ''
    check_items: Tuple[CheckItem, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict) -> 'Checklist':
        return cls(
            id=text(data.get('id')),
            id_card=text(data.get('idCard')),
            check_items=tuple(
                CheckItem.from_dict(item) for item in items(data.get('checkItems')) if isinstance(item, dict)
            )
        )


@dataclass(frozen=True)
class Label:
    id: str
    name: str = ''

    @classmethod
    def from_dict(cls, data: Dict) -> 'Label':
        return cls(id=text(data.get('id')), name=text(data.get('name')))


@dataclass(frozen=True)
class TrelloList:
    """A Trello list, i.e. one workflow column of the board"""
    id: str
    name: str = ''
    closed: bool = False

    @classmethod
    def from_dict(cls, data: Dict) -> 'TrelloList':
        return cls(
            id=text(data.get('id')),
            name=text(data.get('name')),
            closed=bool(data.get('closed', False))
        )


@dataclass(frozen=True)
class Card:
    """
    A Trello card

    Fields:
        id: Trello card id
        name: Card title
        desc: Free-text description
        url: Link back to the card on Trello
        id_list: Id of the list the card sits in
        id_labels: Label ids in card order
        attachments: Attachment URLs in card order ('' when an attachment has none)
        closed: True for archived cards
        date_last_activity: Raw timestamp string as exported
    """
    id: str
    name: str = ''
    desc: str = ''
    url: str = ''
    id_list: str = ''
    id_labels: Tuple[str, ...] = ()
    attachments: Tuple[str, ...] = ()
    closed: bool = False
    date_last_activity: str = ''

    @classmethod
    def from_dict(cls, data: Dict) -> 'Card':
        attachments = []
        for attachment in items(data.get('attachments')):
            if isinstance(attachment, dict):
                attachments.append(text(attachment.get('url')))
            else:
                attachments.append('')

        return cls(
            id=text(data.get('id')),
            name=text(data.get('name')),
            desc=text(data.get('desc')),
            url=text(data.get('url')),
            id_list=text(data.get('idList')),
            id_labels=tuple(text(label_id) for label_id in items(data.get('idLabels'))),
            attachments=tuple(attachments),
            closed=bool(data.get('closed', False)),
            date_last_activity=text(data.get('dateLastActivity'))
        )


@dataclass(frozen=True)
class Board:
    """A Trello board export, read once and never modified afterwards"""
    cards: Tuple[Card, ...] = ()
    labels: Tuple[Label, ...] = ()
    lists: Tuple[TrelloList, ...] = ()
    checklists: Tuple[Checklist, ...] = ()
    details: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Board':
        # Scalar attributes (name, url, ...) as strings, collections as counts
        details = {}
        for key, value in data.items():
            if isinstance(value, str):
                details[key] = value
            elif isinstance(value, list) and value:
                details[key] = len(value)

        return cls(
            cards=tuple(Card.from_dict(card) for card in data.get('cards') or []),
            labels=tuple(Label.from_dict(label) for label in data.get('labels') or []),
            lists=tuple(TrelloList.from_dict(lst) for lst in data.get('lists') or []),
            checklists=tuple(Checklist.from_dict(checklist) for checklist in data.get('checklists') or []),
            details=details
        )


@dataclass(frozen=True)
class PivotalRow:
    """Field values derived from one card, before flattening into CSV columns"""
    title: str
    story_type: StoryType
    description: str
    labels: str
    current_state: StoryState
    created_at: str
    accepted_at: str
    estimate: int
    tasks: Tuple[CheckItem, ...] = ()


@dataclass
class ConversionSummary:
    """Track conversion statistics"""
    cards_converted: int = 0
    task_slots: int = 0
    types: Dict[str, int] = None
    states: Dict[str, int] = None
    unresolved_references: List[str] = None

    def __post_init__(self):
        if self.types is None:
            self.types = {}
        if self.states is None:
            self.states = {}
        if self.unresolved_references is None:
            self.unresolved_references = []

    def add_row(self, row: PivotalRow):
        self.cards_converted += 1
        self.types[row.story_type.value] = self.types.get(row.story_type.value, 0) + 1
        self.states[row.current_state.value] = self.states.get(row.current_state.value, 0) + 1

    def add_unresolved(self, message: str):
        self.unresolved_references.append(message)

    def print_summary(self):
        """Print conversion summary report"""
        logger.info("\n" + "="*60)
        logger.info("CONVERSION SUMMARY")
        logger.info("="*60)
        logger.info(f"Cards converted: {self.cards_converted}")
        logger.info(f"Task/Task Status column pairs: {self.task_slots}")
        for story_type, count in sorted(self.types.items()):
            logger.info(f"  {story_type}: {count}")
        for state, count in sorted(self.states.items()):
            logger.info(f"  {state}: {count}")
        if self.unresolved_references:
            logger.info(f"\nUnresolved references ({len(self.unresolved_references)}):")
            for i, message in enumerate(self.unresolved_references, 1):
                logger.info(f"  {i}. {message}")
        logger.info("="*60 + "\n")
