import os
import sys

SITE_NAME = "Golf Outings"
LANGUAGES = {
    "en": "English",
}
TEAM_SIGNATURE = "Golf Outings Team"

DEFAULT_PORT = 3000
DEFAULT_DB_FILE = "db.json"
DEFAULT_ADMIN_USER = "admin"
DEFAULT_ADMIN_PASS = "admin"
DEFAULT_SESSION_SECRET = "golf_outings_secret"
DEFAULT_MAIL_SERVER = "smtp.gmail.com"
DEFAULT_MAIL_PORT = 587


def get_data_directory():
    """
    Returns the writable data directory for the application.
    Windows: %APPDATA%/golfoutings
    Linux/Mac: ~/.golfoutings
    """
    if sys.platform == "win32":
        path = os.path.join(os.environ.get("APPDATA", os.path.expanduser("~")), "golfoutings")
    else:
        path = os.path.expanduser("~/.golfoutings")

    if not os.path.exists(path):
        os.makedirs(path)

    return path
