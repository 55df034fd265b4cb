"""Excel workbook export of tabulation results."""

import logging
from pathlib import Path
from typing import Iterable, Sequence

import openpyxl
from openpyxl.styles import Font

from .constants import QUESTION_TYPE_INDICES, TEAM_RESULTS_HEADER
from .formatters import individual_header, selected_types
from .models import QuizzerDirectory, RoundRecord, StatsMatrix, TeamStanding
from .utils import strip_marker

logger = logging.getLogger('qperf.excel_writer')

INDIVIDUAL_SHEET = 'Individual Results'
TEAM_SHEET = 'Team Results'
ROUNDS_SHEET = 'Rounds'


def _write_header(ws, header: Sequence[str]) -> None:
    ws.append(list(header))
    for cell in ws[1]:
        cell.font = Font(bold=True)


def export_workbook(
    excel_path: str | Path,
    directory: QuizzerDirectory,
    stats: StatsMatrix,
    standings: Iterable[TeamStanding],
    rounds: Iterable[RoundRecord] = (),
    question_types: Sequence[str] = (),
    display_rounds: bool = False,
) -> Path:
    """
    Write individual statistics and team results to an .xlsx workbook.

    Args:
        excel_path: Output path (parent directories are created)
        directory: Quizzer directory (row order of the individual sheet)
        stats: Accumulated statistics
        standings: Ranked team standings
        rounds: Round records, written to a 'Rounds' sheet when display_rounds
        question_types: Question types to include (empty means all)
        display_rounds: Whether to add the per-round sheet

    Returns:
        Path of the saved workbook
    """
    excel_path = Path(excel_path)
    excel_path.parent.mkdir(parents=True, exist_ok=True)

    wb = openpyxl.Workbook()

    ws = wb.active
    ws.title = INDIVIDUAL_SHEET
    _write_header(ws, individual_header(question_types))
    types = selected_types(question_types)
    for i, (quizzer, team) in enumerate(directory.entries):
        row: list = [strip_marker(quizzer), strip_marker(team)]
        for qtype in types:
            row.extend(stats.row(i, QUESTION_TYPE_INDICES[qtype]))
        ws.append(row)

    ws = wb.create_sheet(TEAM_SHEET)
    _write_header(ws, TEAM_RESULTS_HEADER)
    for s in standings:
        ws.append([strip_marker(s.name), s.placement, s.wins, s.losses, s.total_score])

    if display_rounds:
        ws = wb.create_sheet(ROUNDS_SHEET)
        _write_header(ws, ['Room', 'Round', 'Team', 'Score'])
        for round_record in rounds:
            for name, score in zip(round_record.team_names, round_record.team_scores):
                ws.append([round_record.room, round_record.round, strip_marker(name), score])

    wb.save(excel_path)
    wb.close()
    logger.info(f'Results saved to {excel_path}')
    return excel_path
