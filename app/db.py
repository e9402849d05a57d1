"""
Connection Provider

Hands out one database connection per call, built from the DatabaseSettings
the application was created with.
"""

import logging
from contextlib import contextmanager

from flask import current_app
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

logger = logging.getLogger(__name__)


class ConnectionProvider:
    """Flask extension owning the engine used for admin mutations.

    Unless an engine is supplied, the engine has no pool: every ``acquire()``
    opens a fresh connection and closes it when the ``with`` block exits.
    """

    def __init__(self, app=None, settings=None):
        if app is not None:
            self.init_app(app, settings)

    def init_app(self, app, settings, engine=None):
        if engine is None:
            engine = create_engine(settings.sqlalchemy_url(), poolclass=NullPool)
        app.extensions['connection_provider'] = _ProviderState(settings, engine)
        logger.debug('Connection provider ready for %s', settings.display_url())

    @property
    def _state(self):
        return current_app.extensions['connection_provider']

    @property
    def settings(self):
        return self._state.settings

    @property
    def engine(self):
        return self._state.engine

    @contextmanager
    def acquire(self):
        """Yield a live connection and close it afterwards.

        Connectivity problems (bad credentials, unreachable host, invalid
        URL) propagate as SQLAlchemy errors from the ``with`` statement.
        """
        with self.engine.connect() as conn:
            yield conn


class _ProviderState:

    def __init__(self, settings, engine):
        self.settings = settings
        self.engine = engine
