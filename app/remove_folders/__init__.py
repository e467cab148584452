"""remove-folders - find and delete directories by name.

Searches a directory tree for subdirectories with an exact name and,
after confirmation, removes them.
"""

__version__ = "0.1.0"

# Program name shown in the banner and used as the command name
APP_NAME = "remove-folders"
