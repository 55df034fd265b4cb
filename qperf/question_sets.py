"""Question-set (RTF) parsing into per-round question types.

Question-set files are the RTF documents printed for quizmasters. Each set
starts with a "SET #<id>" heading, and every question line is laid out
with RTF tab control words:

    SET #3 ...\\par 1 G\\tab In the beginning ...\\tab \\par 2 Q\\tab ...

Splitting on "\\tab" leaves the question type as the last character of
every even-indexed part. Sets hold at most 20 questions; anything after
that (overtime, spares) is ignored.
"""

import logging
import re
from pathlib import Path
from typing import Iterable

from .constants import MAX_QUESTIONS_PER_ROUND, QUESTION_TYPES

logger = logging.getLogger('qperf.question_sets')

SET_HEADING = re.compile(r'SET #([A-Za-z0-9]+)')
RTF_TAB = '\\tab'

FORMAT_WARNING = (
    'Warning: RTF question set file might have been formatted incorrectly. '
    'Please use only the original RTF files!'
)


def parse_question_sets(content: str) -> tuple[dict[str, list[str]], list[str]]:
    """
    Extract question types per round from RTF text.

    Args:
        content: Raw RTF document text

    Returns:
        Tuple of (question types by round id, warnings)
    """
    question_types_by_round: dict[str, list[str]] = {}
    warnings: list[str] = []

    current_round = None
    question_types: list[str] = []

    for i, part in enumerate(content.split(RTF_TAB)):
        match = SET_HEADING.search(part)
        if match:
            if question_types:
                if current_round is None:
                    warnings.append(FORMAT_WARNING)
                else:
                    question_types_by_round[current_round] = question_types
            current_round = match.group(1)
            question_types = []

        text = part.strip()
        if i % 2 == 0 and len(text) > 1 and len(question_types) < MAX_QUESTIONS_PER_ROUND:
            question_types.append(text[-1])

    if question_types:
        if current_round is None:
            warnings.append(FORMAT_WARNING)
        else:
            question_types_by_round[current_round] = question_types

    return question_types_by_round, warnings


def read_question_set_file(path: Path | str) -> tuple[dict[str, list[str]], list[str]]:
    """
    Parse one RTF question-set file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError, UnicodeDecodeError: If the file can't be read
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'Question set file not found: {path}')

    content = path.read_text(encoding='utf-8', errors='replace')
    return parse_question_sets(content)


def load_question_types(
    set_paths: Iterable[Path | str],
) -> tuple[dict[str, list[str]], list[str]]:
    """
    Build the QuestionTypeMap from several question-set files.

    When two files define the same round, the first one wins. Files that
    can't be read are reported and skipped.

    Returns:
        Tuple of (question types by round id, warnings)
    """
    question_types_by_round: dict[str, list[str]] = {}
    warnings: list[str] = []

    for path in set_paths:
        path = Path(path)
        logger.debug(f'Reading question sets: {path}')
        try:
            file_types, file_warnings = read_question_set_file(path)
        except (OSError, UnicodeDecodeError) as e:
            message = f'Error processing question set file {path.name}: {e}'
            logger.warning(message)
            warnings.append(message)
            continue

        warnings.extend(file_warnings)
        for round_id, types in file_types.items():
            if round_id in question_types_by_round:
                message = f'Warning: Duplicate question set number: {round_id}, using only the first.'
                logger.warning(message)
                warnings.append(message)
            else:
                question_types_by_round[round_id] = types

    logger.debug(f'Question types by round: {question_types_by_round}')
    return question_types_by_round, warnings


def unknown_question_types(question_types_by_round: dict[str, list[str]]) -> dict[str, list[str]]:
    """Round id -> question-type codes that aren't valid question types."""
    unknown = {}
    for round_id, types in question_types_by_round.items():
        bad = [t for t in types if t not in QUESTION_TYPES]
        if bad:
            unknown[round_id] = bad
    return unknown
