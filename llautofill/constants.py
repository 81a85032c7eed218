"""Constants for the LL autofill engine."""

# Header tokens (comparable form) identifying each table
CURRENT_SEASON_HEADERS = ('W', 'L', 'T', 'PTS', 'TMP', 'TCA', 'PCAA', 'RANK')
RESULTS_HEADERS = ('MATCH DAY', 'OPPONENT', 'RESULT', 'RECORD', 'RANK')
STANDINGS_HEADERS = ('PLAYER', 'W', 'L', 'T', 'TCA', 'PCAA')

# CSS selectors for candidate tables, in the order the site uses them
CURRENT_SEASON_SELECTORS = 'table.std, table.std.std_bord'
RESULTS_SELECTORS = 'table.std, table'
STANDINGS_SELECTORS = 'table'

# Match days eligible for filling (day 1 has no prior opponent data)
MATCH_DAY_MIN = 2
MATCH_DAY_MAX = 25
MATCH_DAY_PATTERN = r'(?:MATCH\s*DAY|MD)\s*(\d{1,2})'

# Result cell formatting
METRIC_DECIMALS = 3
RESULT_SEPARATOR = '⋅'

# Half-cell shading (left = opponent favoured, right = player favoured)
SHADE_LEFT_RGB = (255, 0, 0)
SHADE_RIGHT_RGB = (0, 128, 0)
SHADE_OPACITY = 0.15

# Profile page gate and rundle link
PROFILE_PATH = '/profiles.php'
STANDINGS_LINK_SELECTOR = "a[href*='standings.php']"

DEFAULT_BASE_URL = 'https://www.learnedleague.com'
DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Safari/537.36'
)
