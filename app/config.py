"""
Configuration settings for the band site backend
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from sqlalchemy.engine import make_url

from app.errors import ConfigurationError

load_dotenv()


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database connection (required, validated by DatabaseSettings)
    DB_URL = os.environ.get('DB_URL')
    DB_USER = os.environ.get('DB_USER')
    DB_PASS = os.environ.get('DB_PASS')

    # Where admin actions send the browser back to
    ADMIN_LISTING_URL = os.environ.get('ADMIN_LISTING_URL') or '/admin.jsp'

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    LOG_LEVEL = 'WARNING'


@dataclass(frozen=True)
class DatabaseSettings:
    """Database URL and credentials, fixed for the lifetime of the process."""

    url: str
    user: str
    password: str

    REQUIRED_KEYS = ('DB_URL', 'DB_USER', 'DB_PASS')

    @classmethod
    def from_mapping(cls, mapping):
        """Build settings from a config mapping.

        Raises:
            ConfigurationError: if any of DB_URL, DB_USER, DB_PASS is
                missing or blank.
        """
        missing = [key for key in cls.REQUIRED_KEYS
                   if not str(mapping.get(key) or '').strip()]
        if missing:
            raise ConfigurationError(missing)
        return cls(url=mapping['DB_URL'].strip(),
                   user=mapping['DB_USER'],
                   password=mapping['DB_PASS'])

    def sqlalchemy_url(self):
        """Return the connection URL with the credentials merged in."""
        url = make_url(self.url)
        # the SQLite driver refuses URLs that carry a username or password
        if url.get_backend_name() == 'sqlite':
            return url
        return url.set(username=self.user, password=self.password)

    def display_url(self):
        """Return DB_URL with any embedded password masked, for logs."""
        return make_url(self.url).render_as_string(hide_password=True)

    def __repr__(self):
        return f'DatabaseSettings(url={self.display_url()!r}, user={self.user!r}, password=***)'
