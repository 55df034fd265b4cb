from .models import (
    EventRecord,
    QuizzerDirectory,
    RoundGroup,
    RoundRecord,
    StatsMatrix,
    TeamStanding,
)
from .schemas import ReportOptions
from .event_log import filter_records, load_event_records, parse_record
from .question_sets import load_question_types, parse_question_sets
from .segmenter import SegmentedRounds, segment_rounds
from .accumulator import AccumulatedStats, accumulate, resolve_question_type
from .ranking import rank_teams
from .formatters import format_individual_results, format_team_results
from .excel_writer import export_workbook
from .tabulator import TabulationResult, qperf, run_report, tabulate

__all__ = [
    # Models
    'EventRecord',
    'QuizzerDirectory',
    'RoundGroup',
    'RoundRecord',
    'StatsMatrix',
    'TeamStanding',
    'ReportOptions',
    # Input
    'parse_record',
    'filter_records',
    'load_event_records',
    'parse_question_sets',
    'load_question_types',
    # Pipeline
    'SegmentedRounds',
    'segment_rounds',
    'AccumulatedStats',
    'accumulate',
    'resolve_question_type',
    'rank_teams',
    # Output
    'format_individual_results',
    'format_team_results',
    'export_workbook',
    # Entry points
    'TabulationResult',
    'tabulate',
    'run_report',
    'qperf',
]
