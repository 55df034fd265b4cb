"""Unit tests for quiz log reading and filtering."""

from qperf.event_log import filter_records, load_event_records, parse_record
from qperf.utils import parse_int_field, strip_marker


def log_row(code, name='', team='0', seat='0', question='1', room='A', round_='1', tournament='Fall'):
    """Build a QuizMachine-style row with quote-wrapped fields."""
    return [
        "'1'", f"'{tournament}'", "'x'", f"'{room}'", f"'{round_}'", f"'{question}'",
        "'x'", f"'{name}'", f"'{team}'", f"'{seat}'", f"'{code}'",
    ]


class TestFieldParsing:
    """Tests for quote-marker stripping and numeric fields."""

    def test_strip_marker(self):
        assert strip_marker("'TC'") == 'TC'
        assert strip_marker('TC') == 'TC'
        assert strip_marker("''") == ''

    def test_parse_int_field(self):
        assert parse_int_field("'12'") == 12
        assert parse_int_field('3') == 3

    def test_parse_int_field_fallback(self):
        """Test unparseable numbers fall back to the default."""
        assert parse_int_field("'x'") == 0
        assert parse_int_field('', default=1) == 1


class TestParseRecord:
    """Tests for parse_record()."""

    def test_parse_full_row(self):
        record = parse_record(log_row('TC', name='Jane Doe', team='1', seat='2', question='7', room='B', round_='4'))
        assert record.code == 'TC'
        assert record.name == 'Jane Doe'
        assert record.team == 1
        assert record.seat == 2
        assert record.question == 7
        assert record.room == 'B'
        assert record.round == '4'
        assert record.tournament == 'Fall'

    def test_short_row(self):
        """Test missing columns parse as empty fields instead of failing."""
        record = parse_record(["'1'", "'Fall'"])
        assert record.code == ''
        assert record.question == 1
        assert record.team == 0

    def test_record_keeps_raw_columns(self):
        row = log_row('QN', name='Anna')
        assert parse_record(row).columns == tuple(row)


class TestFilterRecords:
    """Tests for event-code and tournament filtering."""

    def test_keeps_tabulated_codes(self):
        rows = [log_row(code) for code in ('TC', 'TE', 'BC', 'BE', 'TN', 'QN', 'RM')]
        assert len(filter_records(rows)) == 7

    def test_drops_other_codes(self):
        rows = [log_row('TC'), log_row('TO'), log_row('AP'), log_row('')]
        records = filter_records(rows)
        assert [r.code for r in records] == ['TC']

    def test_tournament_filter(self):
        rows = [log_row('TC', tournament='Fall'), log_row('TC', tournament='Spring')]
        records = filter_records(rows, tournament='Spring')
        assert len(records) == 1
        assert records[0].tournament == 'Spring'

    def test_tournament_filter_ignores_quote_markers(self):
        rows = [log_row('TC', tournament='Spring')]
        assert len(filter_records(rows, tournament="'Spring'")) == 1


class TestLoadEventRecords:
    """Tests for reading log files from disk."""

    def test_reads_csv_file(self, tmp_path):
        log = tmp_path / 'day1.csv'
        log.write_text(
            ",".join(log_row('TN', name='Eagles')) + "\n"
            + ",".join(log_row('TC', name='Anna')) + "\n"
            + ",".join(log_row('TO')) + "\n"
        )
        records, warnings = load_event_records([log])
        assert [r.code for r in records] == ['TN', 'TC']
        assert warnings == []

    def test_files_read_in_order(self, tmp_path):
        first = tmp_path / 'a.csv'
        second = tmp_path / 'b.csv'
        first.write_text(",".join(log_row('TC', name='Anna')) + "\n")
        second.write_text(",".join(log_row('TC', name='Ben')) + "\n")
        records, _ = load_event_records([first, second])
        assert [r.name for r in records] == ['Anna', 'Ben']

    def test_unreadable_file_is_skipped(self, tmp_path):
        """Test a missing file is reported and the other files still load."""
        good = tmp_path / 'good.csv'
        good.write_text(",".join(log_row('TC', name='Anna')) + "\n")
        records, warnings = load_event_records([tmp_path / 'missing.csv', good])
        assert len(records) == 1
        assert len(warnings) == 1
        assert 'missing.csv' in warnings[0]

    def test_no_records_for_tournament_warning(self, tmp_path):
        log = tmp_path / 'day1.csv'
        log.write_text(",".join(log_row('TC', tournament='Fall')) + "\n")
        records, warnings = load_event_records([log], tournament='Winter')
        assert records == []
        assert warnings == ['Warning: No records found for tournament Winter']
