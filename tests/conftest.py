"""Shared HTML builders for autofill tests."""

import logging

import pytest

STANDINGS_HEADERS = ['Rank', 'Player', 'W', 'L', 'T', 'PTS', 'MPD', 'TMP', 'TCA', 'PCAA']
RESULTS_HEADERS = ['Match Day', 'Opponent', 'Question Scores', 'Result', 'Record', 'Rank']
SEASON_HEADERS = ['Season', 'W', 'L', 'T', 'PTS', 'MPD', 'TMP', 'TCA', 'PCAA', 'Rank']


def _table(headers, rows, css_class='std'):
    head = ''.join(f'<th>{h}</th>' for h in headers)
    body = ''.join(
        '<tr>' + ''.join(f'<td>{cell}</td>' for cell in row) + '</tr>' for row in rows
    )
    return (
        f'<table class="{css_class}"><thead><tr>{head}</tr></thead>'
        f'<tbody>{body}</tbody></table>'
    )


def _page(*tables):
    return '<html><body>' + ''.join(tables) + '</body></html>'


@pytest.fixture
def make_table():
    """Build one <table> with a thead header row and tbody rows."""
    return _table


@pytest.fixture
def make_page():
    """Wrap table markup in a minimal HTML page."""
    return _page


@pytest.fixture
def standings_page():
    """Build a standings page from (rank, player, w, l, t, tca, pcaa) tuples."""

    def build(entries, headers=STANDINGS_HEADERS):
        rows = []
        for rank, player, w, l, t, tca, pcaa in entries:
            values = {
                'Rank': rank, 'Player': player, 'W': w, 'L': l, 'T': t,
                'PTS': '', 'MPD': '', 'TMP': '', 'TCA': tca, 'PCAA': pcaa,
            }
            rows.append([values.get(h, '') for h in headers])
        return _page(_table(headers, rows))

    return build


@pytest.fixture
def results_table():
    """Build a results table from (match day, opponent, result, record, rank) tuples."""

    def build(entries):
        rows = [[md, opp, '5(1)', result, record, rank] for md, opp, result, record, rank in entries]
        return _table(RESULTS_HEADERS, rows)

    return build


@pytest.fixture
def season_table():
    """Build a current-season table for a player with the given TCA/PCAA."""

    def build(tca, pcaa, href='/standings.php?98&A_Pacific'):
        link = f'<a href="{href}">A Pacific</a>' if href else 'A Pacific'
        row = ['LL98 ' + link, '4', '2', '1', '9', '12', '60', str(tca), str(pcaa), '3']
        return _table(SEASON_HEADERS, [row], css_class='std std_bord')

    return build


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers/levels installed by setup_logging() during a test."""
    logger = logging.getLogger('llautofill')
    level = logger.level
    yield
    logger.handlers = []
    logger.setLevel(level)
