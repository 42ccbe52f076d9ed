# Files
DB_CONFIG_FILE = 'config/database.json'
DEFAULT_DATABASE_FILE = 'dadjokes.sqlite3'
DEFAULT_LOG_FILE = 'default.log'
APP_LOG_FILE = 'dadjokes.log'

# Loggers
APP_LOGGER_NAME = 'dadjokes'
TRACEBACK_LOGGER_NAME = 'traceback'
STORE_LOGGER_NAME = f'{APP_LOGGER_NAME}.store'
DATABASE_LOGGER_NAME = f'{APP_LOGGER_NAME}.database'
STARTUP_LOGGER_NAME = f'{APP_LOGGER_NAME}.startup'
VIEW_LOGGER_NAME = f'{APP_LOGGER_NAME}.views'
CONSOLE_LOGGER_NAME = f'{APP_LOGGER_NAME}.console'

# Jokes
RATINGS = ['Sob', 'Sigh', 'Silence', 'Smirk']
DEFAULT_RATING = 'Silence'

# Cards
CARD_WIDTH = 30
CARD_SPACING = 2
IMAGE_COUNT = 4
DELETE_DRAG_THRESHOLD = -200
OFFSCREEN_OFFSET = -1000
DELETE_DELAY_SECONDS = 0.3
