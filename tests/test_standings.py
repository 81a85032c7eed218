"""Unit tests for standings page parsing."""

import pytest

from llautofill.standings import parse_count, parse_decimal, parse_standings


class TestParseStandings:
    """Tests for building the standings index."""

    def test_basic_entries(self, standings_page):
        html = standings_page([
            ('1', 'Doe, Jane', '4', '0', '0', '5', '1.2'),
            ('2', 'Smith, John', '2', '1', '1', '4.5', '1.75'),
        ])
        index = parse_standings(html)
        assert list(index) == ['Doe, Jane', 'Smith, John']

        jane = index['Doe, Jane']
        assert jane.tca == 5.0
        assert jane.pcaa == 1.2
        assert (jane.wins, jane.losses, jane.ties) == (4, 0, 0)
        assert jane.record == '4-0-0'
        assert jane.rank == '1'
        assert index['Smith, John'].record == '2-1-1'

    def test_non_numeric_win_excluded_sibling_kept(self, standings_page):
        """Test a row with a bad W value is dropped without aborting the parse."""
        html = standings_page([
            ('1', 'Bad, Row', 'x', '0', '0', '5', '1.2'),
            ('2', 'Good, Row', '3', '1', '0', '6', '1.0'),
        ])
        index = parse_standings(html)
        assert 'Bad, Row' not in index
        assert 'Good, Row' in index

    @pytest.mark.parametrize('tca,pcaa', [('', '1.0'), ('5', ''), ('n/a', '1.0'), ('5', 'nan')])
    def test_bad_decimals_excluded(self, standings_page, tca, pcaa):
        html = standings_page([
            ('1', 'Bad, Row', '1', '0', '0', tca, pcaa),
            ('2', 'Good, Row', '3', '1', '0', '6', '1.0'),
        ])
        assert list(parse_standings(html)) == ['Good, Row']

    def test_negative_count_excluded(self, standings_page):
        html = standings_page([
            ('1', 'Bad, Row', '-1', '0', '0', '5', '1.0'),
            ('2', 'Good, Row', '3', '1', '0', '6', '1.0'),
        ])
        assert list(parse_standings(html)) == ['Good, Row']

    def test_duplicate_names_last_wins(self, standings_page):
        html = standings_page([
            ('1', 'Doe, Jane', '4', '0', '0', '5', '1.2'),
            ('2', 'Doe, Jane', '1', '3', '0', '2', '2.5'),
        ])
        index = parse_standings(html)
        assert len(index) == 1
        assert index['Doe, Jane'].record == '1-3-0'
        assert index['Doe, Jane'].rank == '2'

    def test_display_name_preserved(self, standings_page):
        html = standings_page([('1', "O'Brien,\xa0 Pat.", '1', '1', '1', '3', '1')])
        assert list(parse_standings(html)) == ["O'Brien, Pat."]

    def test_rank_defaults_to_position_without_rank_column(self, standings_page):
        headers = ['Player', 'W', 'L', 'T', 'TCA', 'PCAA']
        html = standings_page(
            [
                ('', 'First, A', '1', '0', '0', '3', '1'),
                ('', 'Second, B', '0', '1', '0', '2', '1'),
            ],
            headers=headers,
        )
        index = parse_standings(html)
        assert index['First, A'].rank == '1'
        assert index['Second, B'].rank == '2'

    def test_blank_rank_cell_defaults_to_position(self, standings_page):
        html = standings_page([
            ('1', 'First, A', '1', '0', '0', '3', '1'),
            ('', 'Second, B', '0', '1', '0', '2', '1'),
        ])
        assert parse_standings(html)['Second, B'].rank == '2'

    def test_column_order_independent(self, standings_page):
        headers = ['PCAA', 'TCA', 'T', 'L', 'W', 'Player', 'Rank']
        html = standings_page([('7', 'Doe, Jane', '4', '1', '2', '5', '1.2')], headers=headers)
        entry = parse_standings(html)['Doe, Jane']
        assert entry.record == '4-1-2'
        assert (entry.tca, entry.pcaa, entry.rank) == (5.0, 1.2, '7')

    def test_empty_rows_skipped(self, make_table, make_page):
        headers = ['Rank', 'Player', 'W', 'L', 'T', 'TCA', 'PCAA']
        rows = [['', '', '', '', '', '', ''], ['2', 'Doe, Jane', '4', '0', '0', '5', '1.2']]
        index = parse_standings(make_page(make_table(headers, rows)))
        assert list(index) == ['Doe, Jane']
        assert index['Doe, Jane'].rank == '2'

    def test_empty_player_name_skipped(self, standings_page):
        html = standings_page([
            ('1', '', '4', '0', '0', '5', '1.2'),
            ('2', 'Doe, Jane', '4', '0', '0', '5', '1.2'),
        ])
        assert list(parse_standings(html)) == ['Doe, Jane']

    def test_no_standings_table(self, make_table, make_page):
        html = make_page(make_table(['Player', 'W', 'L', 'TCA', 'PCAA'], [['a', '1', '1', '1', '1']]))
        assert parse_standings(html) is None

    def test_zero_surviving_rows_is_failure(self, standings_page):
        html = standings_page([('1', 'Bad, Row', 'x', '0', '0', '5', '1.2')])
        assert parse_standings(html) is None

    def test_skips_non_standings_tables(self, make_table, make_page):
        other = make_table(['Player', 'Score'], [['Nobody', '3']])
        standings = make_table(
            ['Player', 'W', 'L', 'T', 'TCA', 'PCAA'], [['Doe, Jane', '1', '0', '0', '2', '1']]
        )
        assert list(parse_standings(make_page(other, standings))) == ['Doe, Jane']

    def test_table_without_tbody(self):
        """Test rows that follow the thead without a <tbody> wrapper are parsed."""
        html = (
            '<html><body><table class="std">'
            '<thead><tr><th>Rank</th><th>Player</th><th>W</th><th>L</th><th>T</th>'
            '<th>TCA</th><th>PCAA</th></tr></thead>'
            '<tr><td>1</td><td>Doe, Jane</td><td>4</td><td>0</td><td>0</td>'
            '<td>5</td><td>1.2</td></tr>'
            '</table></body></html>'
        )
        index = parse_standings(html)
        assert list(index) == ['Doe, Jane']
        assert index['Doe, Jane'].record == '4-0-0'

    @pytest.mark.parametrize('wins', ['1_0', '٣', '+3', '3.0'])
    def test_loose_integer_text_excluded(self, standings_page, wins):
        html = standings_page([
            ('1', 'Bad, Row', wins, '0', '0', '5', '1.0'),
            ('2', 'Good, Row', '3', '1', '0', '6', '1.0'),
        ])
        assert list(parse_standings(html)) == ['Good, Row']

    @pytest.mark.parametrize('tca', ['1e3', '1_0.5', '٥', 'inf'])
    def test_loose_decimal_text_excluded(self, standings_page, tca):
        html = standings_page([
            ('1', 'Bad, Row', '1', '0', '0', tca, '1.0'),
            ('2', 'Good, Row', '3', '1', '0', '6', '1.0'),
        ])
        assert list(parse_standings(html)) == ['Good, Row']


class TestNumberParsing:
    """Tests for the W/L/T and TCA/PCAA cell parsers."""

    @pytest.mark.parametrize('text,expected', [('0', 0), ('12', 12), ('007', 7)])
    def test_parse_count(self, text, expected):
        assert parse_count(text) == expected

    @pytest.mark.parametrize('text', ['', '-1', '1_0', '٣', '2.5', 'x'])
    def test_parse_count_rejects(self, text):
        assert parse_count(text) is None

    @pytest.mark.parametrize(
        'text,expected', [('5', 5.0), ('1.25', 1.25), ('.5', 0.5), ('-0.3', -0.3), ('4.', 4.0)]
    )
    def test_parse_decimal(self, text, expected):
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize('text', ['', '1e3', '1_0', '٥', 'nan', 'inf', '.', '1.2.3'])
    def test_parse_decimal_rejects(self, text):
        assert parse_decimal(text) is None
