"""Tournament tabulation: question sets + quiz logs -> statistics and rankings.

This is the entry point tying the pipeline together:

    records -> segment_rounds -> accumulate -> rank_teams -> formatters

Each stage returns its own warnings; they are merged here in pipeline
order and handed back to the caller alongside the results.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from .accumulator import accumulate
from .config import build_options
from .event_log import load_event_records
from .formatters import format_individual_results, format_team_results
from .models import EventRecord, QuizzerDirectory, RoundRecord, StatsMatrix, TeamStanding
from .question_sets import load_question_types
from .ranking import rank_teams
from .schemas import ReportOptions
from .segmenter import segment_rounds
from .validators import validate_all, validate_question_sets

logger = logging.getLogger('qperf.tabulator')


@dataclass
class TabulationResult:
    """Results of one tabulation run."""
    options: ReportOptions
    directory: QuizzerDirectory = field(default_factory=QuizzerDirectory)
    stats: StatsMatrix = field(default_factory=StatsMatrix)
    rounds: list[RoundRecord] = field(default_factory=list)
    standings: list[TeamStanding] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def individual_results(self) -> str:
        return format_individual_results(
            self.directory, self.stats, self.options.question_types, self.options.delimiter
        )

    @property
    def team_results(self) -> str:
        return format_team_results(
            self.standings, self.rounds, self.options.delimiter, self.options.display_rounds
        )

    @property
    def report(self) -> str:
        """Individual statistics, a blank line, then team results."""
        return f'{self.individual_results}\n{self.team_results}'

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable summary of the run."""
        return {
            'quizzers': [
                {
                    'name': quizzer,
                    'team': team,
                    'attempts': self.stats.attempts[i],
                    'correct': self.stats.correct[i],
                    'bonus_attempts': self.stats.bonus_attempts[i],
                    'bonus': self.stats.bonus[i],
                }
                for i, (quizzer, team) in enumerate(self.directory.entries)
            ],
            'rounds': [
                {
                    'room': r.room,
                    'round': r.round,
                    'teams': [
                        {'name': name, 'score': score}
                        for name, score in zip(r.team_names, r.team_scores)
                    ],
                }
                for r in self.rounds
            ],
            'standings': [
                {
                    'name': s.name,
                    'placement': s.placement,
                    'wins': s.wins,
                    'losses': s.losses,
                    'total_score': s.total_score,
                }
                for s in self.standings
            ],
            'warnings': list(self.warnings),
        }


def tabulate(
    records: Iterable[EventRecord],
    question_types: dict[str, list[str]],
    options: Optional[ReportOptions] = None,
) -> TabulationResult:
    """
    Tabulate filtered event records.

    Args:
        records: Filtered event records in log order
        question_types: Round id -> question-type codes
        options: Run options (config defaults if omitted)

    Returns:
        TabulationResult; warnings never stop the run
    """
    options = options or build_options()
    result = TabulationResult(options=options)

    result.warnings.extend(validate_question_sets(question_types))

    segmented = segment_rounds(records)
    result.warnings.extend(segmented.warnings)
    result.directory = segmented.directory
    logger.info(
        f'Confirmed {len(segmented.rounds)} rounds, {len(segmented.teams)} teams, '
        f'{len(segmented.directory)} quizzers'
    )

    accumulated = accumulate(
        segmented.rounds.values(),
        segmented.directory,
        question_types,
        options.missing_round_type,
    )
    result.warnings.extend(accumulated.warnings)
    result.stats = accumulated.stats
    result.rounds = accumulated.rounds

    result.standings = rank_teams(result.rounds)

    errors, round_warnings = validate_all(result.directory, result.stats, result.rounds)
    for error in errors:
        logger.warning(error)
    result.warnings.extend(f'Error: {e}' for e in errors)
    result.warnings.extend(round_warnings)

    return result


def split_paths(paths: str | Path | Iterable[str | Path]) -> list[Path]:
    """Accept a path, a comma-separated string of paths, or an iterable of paths."""
    if isinstance(paths, Path):
        return [paths]
    if isinstance(paths, str):
        return [Path(p.strip().strip('\'"')) for p in paths.split(',') if p.strip()]
    return [Path(p) for p in paths]


def check_paths(paths: list[Path], suffix: str, description: str) -> None:
    """
    Raises:
        FileNotFoundError: If a path doesn't exist
        ValueError: If a path has the wrong extension
    """
    for path in paths:
        if not path.exists():
            raise FileNotFoundError(f'The path to the {description} does not exist: {path}')
        if path.suffix.lower() != suffix:
            raise ValueError(f'The path to the {description} is not a {suffix} file: {path}')


def run_report(
    question_set_paths: str | Path | Iterable[str | Path],
    log_paths: str | Path | Iterable[str | Path],
    options: Optional[ReportOptions] = None,
) -> TabulationResult:
    """
    Tabulate a tournament from question-set RTF files and quiz-log CSV files.

    Args:
        question_set_paths: RTF question-set files
        log_paths: QuizMachine CSV logs
        options: Run options (config defaults if omitted)

    Returns:
        TabulationResult with reading warnings first

    Raises:
        FileNotFoundError: If an input path doesn't exist
        ValueError: If an input path has the wrong extension
    """
    options = options or build_options()
    set_paths = split_paths(question_set_paths)
    data_paths = split_paths(log_paths)
    check_paths(set_paths, '.rtf', 'question sets')
    check_paths(data_paths, '.csv', 'quiz data')

    logger.debug(f'Question set paths: {set_paths}')
    logger.debug(f'Quiz data paths: {data_paths}')
    logger.debug(f'Requested question types: {options.question_types}')

    question_types, set_warnings = load_question_types(set_paths)
    records, log_warnings = load_event_records(data_paths, options.tournament)

    result = tabulate(records, question_types, options)
    result.warnings[:0] = set_warnings + log_warnings
    return result


def qperf(
    question_set_paths: str | Path | Iterable[str | Path],
    log_paths: str | Path | Iterable[str | Path],
    **overrides,
) -> tuple[list[str], str]:
    """
    Tabulate a tournament and return (warnings, report text).

    Keyword overrides are ReportOptions fields (question_types, delimiter,
    tournament, display_rounds, missing_round_type).

    Example:
        warnings, report = qperf('sets.rtf', 'day1.csv,day2.csv', delimiter=';')
    """
    result = run_report(question_set_paths, log_paths, build_options(**overrides))
    return result.warnings, result.report
