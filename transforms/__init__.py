"""
Data transformation modules for converting Trello cards to Pivotal Tracker rows
"""
from .board_index import BoardIndex, index_by
from .task_aggregator import tasks_for_card, max_task_slots
from .mappers import map_story_type, map_current_state
from .field_extractors import (
    extract_title,
    extract_description,
    extract_labels,
    extract_created_at,
    extract_accepted_at,
    extract_task_name,
    extract_task_status
)
from .data_transformer import build_header, build_row, derive_row, transform_board

__all__ = [
    'BoardIndex',
    'index_by',
    'tasks_for_card',
    'max_task_slots',
    'map_story_type',
    'map_current_state',
    'extract_title',
    'extract_description',
    'extract_labels',
    'extract_created_at',
    'extract_accepted_at',
    'extract_task_name',
    'extract_task_status',
    'build_header',
    'build_row',
    'derive_row',
    'transform_board'
]
