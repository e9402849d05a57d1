from concurrent.futures import ThreadPoolExecutor

import pytest

from app import create_app
from app.extensions import db


@pytest.mark.parametrize('role', [None, 'USER', 'admin', ' ADMIN', 'ADMIN ', 0])
def test_non_admin_is_forbidden(client, login_as, seed_comments, comment_ids, role):
    ids = seed_comments('great gig')
    login_as(client, role)

    r = client.post('/admin/comment', data={'comment_id': str(ids[0])})
    assert r.status_code == 403
    assert comment_ids() == ids


def test_missing_role_is_forbidden(client, seed_comments, comment_ids):
    ids = seed_comments('great gig')

    r = client.post('/admin/comment', data={'comment_id': str(ids[0])})
    assert r.status_code == 403
    assert comment_ids() == ids


def test_forbidden_even_with_malformed_id(client, login_as, seed_comments, comment_ids):
    ids = seed_comments('great gig')
    login_as(client, 'USER')

    r = client.post('/admin/comment', data={'comment_id': 'abc'})
    assert r.status_code == 403
    assert comment_ids() == ids


def test_admin_without_comment_id_redirects(client, login_as, seed_comments, comment_ids):
    ids = seed_comments('first', 'second')
    login_as(client, 'ADMIN')

    r = client.post('/admin/comment', data={})
    assert r.status_code == 302
    assert r.headers['Location'] == '/admin.jsp'
    assert comment_ids() == ids


def test_admin_deletes_existing_comment(client, login_as, seed_comments, comment_ids):
    first, second = seed_comments('first', 'second')
    login_as(client, 'ADMIN')

    r = client.post('/admin/comment', data={'comment_id': str(first)})
    assert r.status_code == 302
    assert r.headers['Location'] == '/admin.jsp'
    assert comment_ids() == [second]


def test_comment_id_from_query_string(client, login_as, seed_comments, comment_ids):
    first, second = seed_comments('first', 'second')
    login_as(client, 'ADMIN')

    r = client.post(f'/admin/comment?comment_id={second}')
    assert r.status_code == 302
    assert comment_ids() == [first]


def test_admin_deleting_unknown_comment_still_redirects(client, login_as, seed_comments, comment_ids):
    ids = seed_comments('only')
    login_as(client, 'ADMIN')

    r = client.post('/admin/comment', data={'comment_id': '9999'})
    assert r.status_code == 302
    assert r.headers['Location'] == '/admin.jsp'
    assert comment_ids() == ids


def test_deleting_twice_is_harmless(client, login_as, seed_comments, comment_ids):
    ids = seed_comments('only')
    login_as(client, 'ADMIN')

    for _ in range(2):
        r = client.post('/admin/comment', data={'comment_id': str(ids[0])})
        assert r.status_code == 302
    assert comment_ids() == []


@pytest.mark.parametrize('raw', ['abc', '', '4.0', ' 1', '1_0', '99999999999999999999', '2147483648'])
def test_malformed_comment_id_is_server_error(client, login_as, seed_comments, comment_ids, raw):
    ids = seed_comments('only')
    login_as(client, 'ADMIN')

    r = client.post('/admin/comment', data={'comment_id': raw})
    assert r.status_code == 500
    assert comment_ids() == ids


def test_database_failure_is_server_error(app, client, login_as):
    with app.app_context():
        db.drop_all()
    login_as(client, 'ADMIN')

    r = client.post('/admin/comment', data={'comment_id': '1'})
    assert r.status_code == 500
    assert 'Location' not in r.headers


def test_only_post_is_routed(client, login_as):
    login_as(client, 'ADMIN')
    r = client.get('/admin/comment?comment_id=1')
    assert r.status_code == 405


def test_custom_listing_url(config_class, login_as):
    class _Config(config_class):
        ADMIN_LISTING_URL = '/admin/comments'

    client = create_app(_Config).test_client()
    login_as(client, 'ADMIN')
    r = client.post('/admin/comment')
    assert r.headers['Location'] == '/admin/comments'


def test_concurrent_admin_requests_for_same_comment(app, login_as, seed_comments, comment_ids):
    ids = seed_comments('contested')
    clients = [app.test_client() for _ in range(2)]
    for c in clients:
        login_as(c, 'ADMIN')

    def _post(c):
        return c.post('/admin/comment', data={'comment_id': str(ids[0])})

    with ThreadPoolExecutor(max_workers=2) as pool:
        responses = list(pool.map(_post, clients))

    assert [r.status_code for r in responses] == [302, 302]
    assert comment_ids() == []
