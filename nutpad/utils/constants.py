APP_ORG = "NutPad"
APP_NAME = "NutPad"

EDITOR_ROWS = 15
EDITOR_COLUMNS = 80
DEFAULT_FONT_FAMILY = "monospace"
DEFAULT_FONT_SIZE = 14
DEFAULT_ENCODING = "utf-8"

SPELLING_MARKER = "*"
SYSTEM_WORD_LISTS = (
    "/usr/share/dict/words",
    "/usr/dict/words",
)

FILE_FILTER = "Text files (*.txt);;All files (*)"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_LAST_DIR = "file/last_dir"

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_LEVEL_ENV = "NUTPAD_LOG_LEVEL"
