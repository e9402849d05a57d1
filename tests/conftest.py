import pytest
from sqlalchemy import text

from app import create_app
from app.config import TestConfig
from app.extensions import db
from app.models import Comment


@pytest.fixture()
def config_class(tmp_path):
    class _Config(TestConfig):
        DB_URL = f"sqlite:///{tmp_path / 'site.db'}"
        DB_USER = 'site'
        DB_PASS = 'secret'
    return _Config


@pytest.fixture()
def app(config_class):
    return create_app(config_class)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def login_as():
    def _login(client, role):
        with client.session_transaction() as sess:
            sess['role'] = role
    return _login


@pytest.fixture()
def seed_comments(app):
    def _seed(*bodies):
        with app.app_context():
            comments = [Comment(author='fan', body=body) for body in bodies]
            db.session.add_all(comments)
            db.session.commit()
            return [c.id for c in comments]
    return _seed


@pytest.fixture()
def comment_ids(app):
    def _ids():
        with app.app_context():
            rows = db.session.execute(text('SELECT id FROM comments ORDER BY id'))
            return [row[0] for row in rows]
    return _ids
