"""
Logging setup shared by every phase of the conversion
"""
import sys
import os
import logging
from datetime import datetime
from typing import Optional

from config import CONSOLE_LOG_LEVEL, LOG_DIR

# Configure Windows console for UTF-8 encoding to handle special characters
if sys.platform == 'win32':
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8')
    if hasattr(sys.stderr, 'reconfigure'):
        sys.stderr.reconfigure(encoding='utf-8')

# Create console handler with level from config
console_handler = logging.StreamHandler()
console_handler.setLevel(CONSOLE_LOG_LEVEL)

# Create formatter
formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)

logger = logging.getLogger('trello2pivotal')
logger.setLevel(logging.DEBUG)
logger.addHandler(console_handler)

file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(log_dir: str = LOG_DIR) -> logging.FileHandler:
    """
    Start writing the full DEBUG log to a timestamped file

    Only the command line turns this on, so importing the modules never
    creates a log directory. Calling it again returns the existing handler.
    """
    global file_handler
    if file_handler is not None:
        return file_handler

    # Create logs directory if it doesn't exist
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # Configure logging with UTF-8 encoding to handle special characters
    log_filename = os.path.join(log_dir, f'trello2pivotal_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log')

    # Create file handler with DEBUG level
    file_handler = logging.FileHandler(log_filename, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return file_handler


def disable_file_logging():
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None


def set_console_level(level: int):
    """Change the console handler level (the log file always gets DEBUG)"""
    console_handler.setLevel(level)
