"""Unit tests for validation functions."""

from qperf.constants import MEMORY_INDEX, QUESTION_TYPE_INDICES
from qperf.models import QuizzerDirectory, RoundRecord, StatsMatrix
from qperf.validators import (
    validate_all,
    validate_question_sets,
    validate_round_record,
    validate_stats,
)


def one_quizzer():
    directory = QuizzerDirectory()
    directory.register('Anna', 'Eagles')
    return directory


class TestQuestionSetValidation:
    """Tests for question-set checks."""

    def test_valid_sets(self):
        assert validate_question_sets({'1': ['A', 'G', 'Q'], '2': ['V'] * 20}) == []

    def test_unknown_types(self):
        warnings = validate_question_sets({'3': ['A', 'Z', 'Z', 'K']})
        assert warnings == ['Question set 3 has unknown question types K, Z (counted as G)']

    def test_too_many_questions(self):
        warnings = validate_question_sets({'1': ['G'] * 21})
        assert len(warnings) == 1
        assert 'Question set 1 has 21 questions (max 20)' in warnings[0]


class TestStatsValidation:
    """Tests for statistics consistency checks."""

    def test_consistent_stats(self):
        stats = StatsMatrix.zeros(1)
        q = QUESTION_TYPE_INDICES['Q']
        stats.attempts[0][q] = stats.attempts[0][MEMORY_INDEX] = 2
        stats.correct[0][q] = stats.correct[0][MEMORY_INDEX] = 1
        assert validate_stats(one_quizzer(), stats) == []

    def test_row_count_mismatch(self):
        errors = validate_stats(one_quizzer(), StatsMatrix.zeros(2))
        assert errors == ['attempts has 2 rows for 1 quizzers']

    def test_correct_exceeds_attempts(self):
        stats = StatsMatrix.zeros(1)
        stats.correct[0][QUESTION_TYPE_INDICES['A']] = 1
        errors = validate_stats(one_quizzer(), stats)
        assert errors == ['Anna has more A correct than attempted']

    def test_memory_total_mismatch(self):
        """Test a Q answer that wasn't mirrored into the M column."""
        stats = StatsMatrix.zeros(1)
        stats.bonus_attempts[0][QUESTION_TYPE_INDICES['R']] = 1
        errors = validate_stats(one_quizzer(), stats)
        assert errors == ['Anna bonus attempts memory-verse total does not match Q+R+V']

    def test_negative_count(self):
        stats = StatsMatrix.zeros(1)
        stats.attempts[0][QUESTION_TYPE_INDICES['G']] = -1
        errors = validate_stats(one_quizzer(), stats)
        assert 'Anna has a negative attempts count' in errors


class TestRoundRecordValidation:
    """Tests for round score sanity checks."""

    def test_valid_round(self):
        record = RoundRecord(room='A', round='1', team_names=['Eagles', 'Lions'], team_scores=[90, -10])
        assert validate_round_record(record) == []

    def test_length_mismatch(self):
        record = RoundRecord(room='A', round='1', team_names=['Eagles', 'Lions'], team_scores=[20])
        warnings = validate_round_record(record)
        assert warnings == ['Room A round 1 has 2 teams but 1 scores']

    def test_no_named_teams(self):
        record = RoundRecord(room='B', round='2', team_names=[''], team_scores=[0])
        assert validate_round_record(record) == ['Room B round 2 has no named teams']

    def test_odd_score(self):
        record = RoundRecord(room='A', round='1', team_names=['Eagles'], team_scores=[25])
        warnings = validate_round_record(record)
        assert len(warnings) == 1
        assert 'Eagles scored 25' in warnings[0]


class TestValidateAll:
    def test_errors_and_warnings_separated(self):
        stats = StatsMatrix.zeros(1)
        stats.correct[0][QUESTION_TYPE_INDICES['A']] = 1
        rounds = [RoundRecord(room='A', round='1', team_names=[''], team_scores=[0])]
        errors, warnings = validate_all(one_quizzer(), stats, rounds)
        assert len(errors) == 1
        assert warnings == ['Room A round 1 has no named teams']
