import enum
import os

from dotenv import load_dotenv

from golfoutings.constants import (
    DEFAULT_ADMIN_PASS,
    DEFAULT_ADMIN_USER,
    DEFAULT_DB_FILE,
    DEFAULT_MAIL_PORT,
    DEFAULT_MAIL_SERVER,
    DEFAULT_PORT,
    DEFAULT_SESSION_SECRET,
    SITE_NAME as DEFAULT_SITE_NAME,
)

# Pick up a .env file from the working directory, if present
load_dotenv()


class Config:
    """Base configuration, read from the environment with working defaults."""

    SECRET_KEY = os.environ.get("SESSION_SECRET", DEFAULT_SESSION_SECRET)
    SITE_NAME = DEFAULT_SITE_NAME
    PORT = int(os.environ.get("PORT", DEFAULT_PORT))
    DB_FILE = os.environ.get("DB_FILE", DEFAULT_DB_FILE)

    ADMIN_USER = os.environ.get("ADMIN_USER", DEFAULT_ADMIN_USER)
    ADMIN_PASS = os.environ.get("ADMIN_PASS", DEFAULT_ADMIN_PASS)

    # Flask-Mail. Sending is disabled unless both credentials are set.
    MAIL_SERVER = os.environ.get("MAIL_SERVER", DEFAULT_MAIL_SERVER)
    MAIL_PORT = int(os.environ.get("MAIL_PORT", DEFAULT_MAIL_PORT))
    MAIL_USE_TLS = True
    MAIL_USE_SSL = False
    MAIL_USERNAME = os.environ.get("EMAIL_USER")
    MAIL_PASSWORD = os.environ.get("EMAIL_PASS")
    MAIL_DEFAULT_SENDER = os.environ.get("EMAIL_USER")

    SESSION_COOKIE_HTTPONLY = True


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    SECRET_KEY = "testing"
    ADMIN_USER = "admin"
    ADMIN_PASS = "secret"
    MAIL_USERNAME = None
    MAIL_PASSWORD = None
    MAIL_DEFAULT_SENDER = None
    MAIL_SUPPRESS_SEND = True


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig
