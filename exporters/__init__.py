"""
Readers for the source Trello board export
"""
from .trello_exporter import TrelloExportError, load_board, parse_json, read_content

__all__ = ['TrelloExportError', 'load_board', 'parse_json', 'read_content']
