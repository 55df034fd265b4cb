"""Unit tests for team scoring rules."""

from qperf.scoring import RoundScoreboard, TeamScoreSheet


class TestCorrectAnswers:
    """Tests for TC scoring, quiz-outs and 3rd/4th person bonuses."""

    def test_correct_answer_basic(self):
        """Test a correct answer: 20 points."""
        sheet = TeamScoreSheet('Eagles')
        breakdown = sheet.record_correct('Anna')
        assert sheet.score == 20
        assert breakdown == {'correct': 20}
        assert sheet.find('Anna').correct == 1

    def test_quiz_out_bonus(self):
        """Test 4 correct with no errors: 4 x 20 + 10 quiz-out."""
        sheet = TeamScoreSheet('Eagles')
        for _ in range(4):
            breakdown = sheet.record_correct('Anna')
        assert breakdown['quiz_out'] == 10
        assert sheet.score == 90

    def test_quiz_out_only_once(self):
        """Test the quiz-out bonus does not repeat on a 5th correct answer."""
        sheet = TeamScoreSheet('Eagles')
        for _ in range(5):
            breakdown = sheet.record_correct('Anna')
        assert 'quiz_out' not in breakdown
        assert sheet.score == 110

    def test_no_quiz_out_after_error(self):
        """Test an earlier error blocks the quiz-out bonus."""
        sheet = TeamScoreSheet('Eagles')
        sheet.record_error('Anna', question=2)
        for _ in range(4):
            sheet.record_correct('Anna')
        assert sheet.score == 80

    def test_third_person_bonus(self):
        """Test 3rd distinct quizzer's first correct answer: +10."""
        sheet = TeamScoreSheet('Eagles')
        sheet.record_correct('Anna')
        sheet.record_correct('Ben')
        breakdown = sheet.record_correct('Cara')
        assert breakdown == {'correct': 20, 'person_bonus': 10}
        assert sheet.score == 70

    def test_fourth_person_bonus(self):
        """Test 4th distinct quizzer also earns the bonus."""
        sheet = TeamScoreSheet('Eagles')
        for name in ('Anna', 'Ben', 'Cara'):
            sheet.record_correct(name)
        breakdown = sheet.record_correct('Dan')
        assert breakdown['person_bonus'] == 10
        assert sheet.score == 4 * 20 + 2 * 10

    def test_person_bonus_only_on_first_correct(self):
        """Test a quizzer's second correct answer never earns the person bonus."""
        sheet = TeamScoreSheet('Eagles')
        for name in ('Anna', 'Ben', 'Cara'):
            sheet.record_correct(name)
        breakdown = sheet.record_correct('Anna')
        assert 'person_bonus' not in breakdown

    def test_person_bonus_ignores_quizzers_without_correct(self):
        """Test quizzers with only errors don't count toward the 3-person threshold."""
        sheet = TeamScoreSheet('Eagles')
        sheet.record_correct('Anna')
        sheet.record_error('Ben', question=3)
        breakdown = sheet.record_correct('Cara')
        assert 'person_bonus' not in breakdown
        assert sheet.score == 40

    def test_quiz_out_and_person_bonus_are_independent(self):
        """Test quiz-out and person bonus totals when both occur in a round."""
        sheet = TeamScoreSheet('Eagles')
        sheet.record_correct('Ben')
        sheet.record_correct('Cara')
        for _ in range(4):
            sheet.record_correct('Anna')
        # 6 correct, 3rd person bonus for Anna, quiz-out for Anna
        assert sheet.score == 6 * 20 + 10 + 10


class TestErrors:
    """Tests for TE deductions."""

    def test_first_error_no_penalty(self):
        """Test an early first error costs nothing."""
        sheet = TeamScoreSheet('Eagles')
        breakdown = sheet.record_error('Anna', question=5)
        assert breakdown == {}
        assert sheet.score == 0
        assert sheet.find('Anna').incorrect == 1

    def test_third_error_penalty(self):
        """Test a quizzer's 3rd error: -10."""
        sheet = TeamScoreSheet('Eagles')
        sheet.record_error('Anna', question=1)
        sheet.record_error('Anna', question=2)
        breakdown = sheet.record_error('Anna', question=3)
        assert breakdown == {'error_out': -10}
        assert sheet.score == -10

    def test_fourth_error_no_extra_penalty(self):
        """Test the error-out penalty fires only on the 3rd error."""
        sheet = TeamScoreSheet('Eagles')
        for q in range(1, 5):
            sheet.record_error('Anna', question=q)
        assert sheet.score == -10

    def test_late_error_penalty(self):
        """Test any error on question 16 or later: -10."""
        sheet = TeamScoreSheet('Eagles')
        breakdown = sheet.record_error('Anna', question=16)
        assert breakdown == {'late_error': -10}
        assert sheet.score == -10

    def test_error_before_sixteen_no_penalty(self):
        """Test question 15 is not a penalty question."""
        sheet = TeamScoreSheet('Eagles')
        sheet.record_error('Anna', question=15)
        assert sheet.score == 0

    def test_third_error_on_late_question_single_penalty(self):
        """Test a 3rd error on question 17 deducts 10 once, not twice."""
        sheet = TeamScoreSheet('Eagles')
        sheet.record_error('Anna', question=2)
        sheet.record_error('Anna', question=4)
        sheet.record_error('Anna', question=17)
        assert sheet.score == -10


class TestRoundScoreboard:
    """Tests for round-level bookkeeping across teams."""

    def test_teams_in_team_number_order(self):
        """Test names and scores are reported by team number."""
        board = RoundScoreboard({2: 'Lions', 0: 'Eagles'})
        board.correct(2, 'Zed')
        assert board.team_names() == ['Eagles', 'Lions']
        assert board.team_scores() == [0, 20]

    def test_bonus_adds_ten(self):
        """Test a correct bonus: +10."""
        board = RoundScoreboard({0: 'Eagles', 1: 'Lions'})
        breakdown = board.bonus(1, 'Zed')
        assert breakdown == {'bonus': 10}
        assert board.team_scores() == [0, 10]

    def test_bonus_marks_new_quizzer_active(self):
        """Test a bonus answerer with no entry joins the team with zero counts."""
        board = RoundScoreboard({0: 'Eagles'})
        board.bonus(0, 'Anna')
        entry = board.sheets[0].find('Anna')
        assert entry is not None
        assert (entry.correct, entry.incorrect) == (0, 0)

    def test_bonus_does_not_duplicate_active_quizzer(self):
        """Test a quizzer already active on another team isn't added again."""
        board = RoundScoreboard({0: 'Eagles', 1: 'Lions'})
        board.correct(0, 'Anna')
        board.bonus(1, 'Anna')
        assert board.sheets[1].find('Anna') is None

    def test_bonus_entry_does_not_trigger_person_bonus(self):
        """Test bonus-only quizzers don't count toward the 3-person threshold."""
        board = RoundScoreboard({0: 'Eagles'})
        board.bonus(0, 'Anna')
        board.correct(0, 'Ben')
        breakdown = board.correct(0, 'Cara')
        assert 'person_bonus' not in breakdown

    def test_add_team(self):
        """Test adding a placeholder team."""
        board = RoundScoreboard({0: 'Eagles'})
        assert not board.has_team(3)
        board.add_team(3, 'Hawks')
        assert board.has_team(3)
        assert board.team_names() == ['Eagles', 'Hawks']
