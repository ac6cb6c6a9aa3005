"""
Write Pivotal Tracker import files (.csv)
"""
import csv
import os
import tempfile
from typing import Iterable, List

from config import SANITIZE_SEMICOLONS
from utils import logger


def csv_value_safe(value) -> str:
    """Cell text with ';' replaced by '.', which Pivotal Tracker imports choke on"""
    return str(value).replace(';', '.')


def default_file_mode() -> int:
    """Mode a plain open() would give a new file under the current umask"""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_pivotal_csv(path: str, header: List[str], rows: Iterable[List[str]],
                      sanitize: bool = SANITIZE_SEMICOLONS) -> int:
    """
    Write a Pivotal Tracker CSV file

    Rows go to a temporary file next to the target which replaces the target
    only once every row is written. If anything fails the temporary file is
    removed and the target is left as it was.

    Args:
        path: Target .csv path
        header: Column names
        rows: Column values, one list per story
        sanitize: Replace ';' in every cell

    Returns:
        Number of data rows written
    """
    target_dir = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix='.trello2pivotal_', suffix='.csv', dir=target_dir)
    rows_written = 0
    try:
        with os.fdopen(fd, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f, lineterminator='\n')
            writer.writerow(header)
            for row in rows:
                if sanitize:
                    row = [csv_value_safe(value) for value in row]
                writer.writerow(row)
                rows_written += 1
        # mkstemp creates the file 0600
        os.chmod(tmp_path, default_file_mode())
        os.replace(tmp_path, path)
    except BaseException:
        logger.debug(f"Removing partial CSV file {tmp_path}")
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    logger.info(f"Wrote {rows_written} rows to CSV file: {path}")
    return rows_written
