"""QuizMachine event log reading.

A log line is comma-delimited with no header. Text fields are usually
wrapped in single quotes, e.g.:

    '1','Fall Invitational','x','A','3','5','x','Jane Doe','1','2','TC'

Only the event codes in EVENT_CODES take part in tabulation; everything
else (timeouts, appeals, clock events) is dropped by filter_records().
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Sequence

from .constants import COLUMNS, EVENT_CODES
from .models import EventRecord
from .utils import parse_int_field, strip_marker

logger = logging.getLogger('qperf.event_log')


def _column(columns: Sequence[str], name: str) -> str:
    index = COLUMNS[name]
    return columns[index] if index < len(columns) else ''


def parse_record(columns: Sequence[str]) -> EventRecord:
    """
    Parse the columns of one log line into an EventRecord.

    Quote markers are stripped from every field. Team and seat numbers
    that fail to parse become 0; a question number that fails to parse
    becomes 1.
    """
    return EventRecord(
        tournament=strip_marker(_column(columns, 'tournament')),
        room=strip_marker(_column(columns, 'room')),
        round=strip_marker(_column(columns, 'round')),
        question=parse_int_field(_column(columns, 'question'), default=1),
        name=strip_marker(_column(columns, 'name')),
        team=parse_int_field(_column(columns, 'team')),
        seat=parse_int_field(_column(columns, 'seat')),
        code=strip_marker(_column(columns, 'code')),
        columns=tuple(columns),
    )


def read_log_file(path: Path | str) -> list[list[str]]:
    """
    Read every row of a quiz log CSV file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError, UnicodeDecodeError, csv.Error: If the file can't be read
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'Quiz data file not found: {path}')

    with open(path, newline='', encoding='utf-8-sig') as f:
        return [row for row in csv.reader(f) if row]


def filter_records(rows: Iterable[Sequence[str]], tournament: str = '') -> list[EventRecord]:
    """
    Keep only rows with a tabulated event code and, if given, a matching tournament.

    Args:
        rows: Raw log rows (lists of column strings)
        tournament: Tournament name to keep; empty keeps every tournament

    Returns:
        Parsed EventRecords in input order
    """
    tournament = strip_marker(tournament)
    records = []

    for columns in rows:
        record = parse_record(columns)
        if tournament and record.tournament != tournament:
            continue
        if record.code in EVENT_CODES:
            records.append(record)

    return records


def load_event_records(
    log_paths: Iterable[Path | str],
    tournament: str = '',
) -> tuple[list[EventRecord], list[str]]:
    """
    Read and filter the quiz logs for one run.

    A file that can't be read is reported in the warnings and skipped;
    the remaining files are still processed.

    Args:
        log_paths: Quiz log CSV files, in the order their records should be read
        tournament: Optional tournament-name filter

    Returns:
        Tuple of (records, warnings)
    """
    warnings: list[str] = []
    rows: list[list[str]] = []

    for path in log_paths:
        path = Path(path)
        logger.debug(f'Reading quiz data: {path}')
        try:
            rows.extend(read_log_file(path))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            message = f'Quiz data contains formatting error in file {path.name}: {e}'
            logger.warning(message)
            warnings.append(message)

    records = filter_records(rows, tournament)

    if tournament and rows and not records:
        message = f'Warning: No records found for tournament {tournament}'
        logger.warning(message)
        warnings.append(message)

    logger.debug(f'Found {len(records)} records')
    return records, warnings
