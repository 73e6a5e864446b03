from pathlib import Path

# Hidden file in the user's home directory used when no path is supplied
DEFAULT_SETTINGS_FILENAME = ".4252settings"
DEFAULT_SETTINGS_PATH: Path = Path.home() / DEFAULT_SETTINGS_FILENAME

# Environment variable that overrides the default settings path
SETTINGS_PATH_ENV = "SHELLSETTINGS_FILE"

# Reserved tree entry holding the persistence target
SETTINGS_COMMAND = "settings"
PATH_PROPERTY = "path"

# Characters that open and close a quoted token
QUOTE_CHARS = frozenset({'"', "'"})

# Interactive shell defaults
HISTORY_FILENAME = ".shellsettings_history"
DEFAULT_PROMPT = "settings$ "
