"""
Configuration and constants for Trello to Pivotal Tracker conversion
"""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Logging configuration
# Console log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
CONSOLE_LOG_LEVEL = getattr(
    logging,
    os.getenv('TRELLO2PIVOTAL_CONSOLE_LOG_LEVEL', 'INFO').upper(),
    logging.INFO
)
LOG_DIR = os.getenv('TRELLO2PIVOTAL_LOG_DIR', 'logs')

# Pivotal Tracker rejects some imports with ';' inside cells, so they are
# replaced with '.' when the CSV is written
SANITIZE_SEMICOLONS = os.getenv('TRELLO2PIVOTAL_SANITIZE_SEMICOLONS', '1').strip().lower() not in {
    '0', 'false', 'no', 'off'
}

# Collections every Trello board export must carry
REQUIRED_COLLECTIONS = ('cards', 'labels', 'lists', 'checklists')

# Label names (lower-cased, trimmed) that turn a card into a Bug or a Chore.
# Labels are scanned in card order and later matches overwrite earlier ones.
BUG_LABELS = {'bug', 'fire', 'impact'}
CHORE_LABELS = {'tech debt', 'operations'}

# List name keywords (substring match on the lower-cased list name)
ACCEPTED_LIST_KEYWORDS = ('done', 'released')
REVIEW_LIST_KEYWORDS = ('review',)
STARTED_LIST_KEYWORDS = ('active',)
UNSTARTED_LIST_KEYWORDS = ('ready',)
UNSCHEDULED_LIST_KEYWORDS = ('backlog', 'icebox')

# Check item state that counts as done
COMPLETE_CHECK_ITEM_STATE = 'complete'

# Pivotal Tracker CSV columns. Task columns repeat with identical names,
# one pair per task slot.
FIXED_COLUMNS = [
    'Title',
    'Type',
    'Description',
    'Labels',
    'Current State',
    'Created at',
    'Accepted at',
    'Estimate',
]
TASK_COLUMN = 'Task'
TASK_STATUS_COLUMN = 'Task Status'

# Stories are imported unestimated
DEFAULT_ESTIMATE = 0

# Description provenance lines
DESCRIPTION_SOURCE_PREFIX = 'Imported from Trello Card: '
DESCRIPTION_ATTACHMENT_PREFIX = 'Attachment: '
LABEL_SEPARATOR = ', '

USAGE = 'Usage:\n\n    trello2pivotal  /path/to/source.json  /path/to/target.csv\n'
