"""
Shared fixtures: a small Trello board export covering every mapping rule
"""
import copy
import json
import os
import tempfile

# Keep test runs from creating log files in the working directory
os.environ.setdefault('TRELLO2PIVOTAL_LOG_DIR', tempfile.mkdtemp(prefix='trello2pivotal_logs_'))

import pytest

from models import Board
from transforms import BoardIndex


BOARD_DATA = {
    "id": "board1",
    "name": "Product Board",
    "url": "https://trello.com/b/abc123/product-board",
    "labels": [
        {"id": "lbl-bug", "name": "Bug"},
        {"id": "lbl-fire", "name": " FIRE "},
        {"id": "lbl-debt", "name": "Tech Debt"},
        {"id": "lbl-ops", "name": "Operations"},
        {"id": "lbl-ux", "name": "UX"},
        {"id": "lbl-empty", "name": ""},
    ],
    "lists": [
        {"id": "list-backlog", "name": "Backlog", "closed": False},
        {"id": "list-ready", "name": "Ready for Dev", "closed": False},
        {"id": "list-active", "name": "Active Sprint", "closed": False},
        {"id": "list-review", "name": "Code Review", "closed": False},
        {"id": "list-done", "name": "Done", "closed": False},
        {"id": "list-old", "name": "Old Stuff", "closed": True},
        {"id": "list-misc", "name": "Misc", "closed": False},
    ],
    "cards": [
        {
            "id": "card1",
            "name": "Login page",
            "desc": "Users can log in",
            "url": "https://trello.com/c/card1",
            "idList": "list-active",
            "idLabels": ["lbl-ux"],
            "attachments": [],
            "closed": False,
            "dateLastActivity": "2017-03-01T10:00:00.000Z",
        },
        {
            "id": "card2",
            "name": "Crash on save",
            "desc": "Steps; to reproduce",
            "url": "https://trello.com/c/card2",
            "idList": "list-review",
            "idLabels": ["lbl-debt", "lbl-bug"],
            "attachments": [
                {"url": "https://example.com/screenshot.png"},
                {"name": "no url here"},
            ],
            "closed": False,
            "dateLastActivity": "2017-03-02T10:00:00.000Z",
        },
        {
            "id": "card3",
            "name": "Upgrade dependencies",
            "desc": "",
            "url": "https://trello.com/c/card3",
            "idList": "list-review",
            "idLabels": ["lbl-bug", "lbl-debt"],
            "attachments": [],
            "closed": False,
            "dateLastActivity": "2017-03-03T10:00:00.000Z",
        },
        {
            "id": "card4",
            "name": "Release notes",
            "desc": "Shipped",
            "url": "https://trello.com/c/card4",
            "idList": "list-done",
            "idLabels": [],
            "attachments": [],
            "closed": False,
            "dateLastActivity": "2017-03-04T10:00:00.000Z",
        },
        {
            "id": "card5",
            "name": "Orphan",
            "desc": "",
            "url": "https://trello.com/c/card5",
            "idList": "list-gone",
            "idLabels": ["lbl-gone", "lbl-empty"],
            "attachments": [],
            "closed": True,
            "dateLastActivity": "2017-03-05T10:00:00.000Z",
        },
    ],
    "checklists": [
        {
            "id": "ck1",
            "idCard": "card1",
            "checkItems": [
                {"name": "A", "state": "complete"},
                {"name": "B", "state": "incomplete"},
            ],
        },
        {
            "id": "ck2",
            "idCard": "card4",
            "checkItems": [
                {"name": "Draft", "state": "complete"},
                {"name": "Review", "state": "complete"},
                {"name": "Publish", "state": "incomplete"},
            ],
        },
        {
            "id": "ck3",
            "idCard": "card1",
            "checkItems": [
                {"name": "C", "state": " Complete "},
                {"name": "D", "state": "incomplete"},
            ],
        },
    ],
}


@pytest.fixture
def board_data():
    """A fresh copy of the sample export, safe to modify"""
    return copy.deepcopy(BOARD_DATA)


@pytest.fixture
def board(board_data):
    return Board.from_dict(board_data)


@pytest.fixture
def index(board):
    return BoardIndex.from_board(board)


@pytest.fixture
def cards(board):
    """Cards of the sample board keyed by id"""
    return {card.id: card for card in board.cards}


@pytest.fixture
def write_export(tmp_path):
    """Write a board dict (or raw text) to a .json file and return its path"""
    def _write(data, name='board.json'):
        path = tmp_path / name
        if isinstance(data, (dict, list)):
            path.write_text(json.dumps(data), encoding='utf-8')
        else:
            path.write_text(data, encoding='utf-8')
        return str(path)
    return _write
