import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

import api  # noqa: E402


@pytest.fixture
def client():
    api.app.config['TESTING'] = True
    with api.app.test_client() as c:
        yield c


def test_index(client) -> None:
    data = client.get('/').get_json()
    assert data['name'] == 'Curve Engine API'
    assert '/check' in data['endpoints']


def test_modes(client) -> None:
    data = client.get('/modes').get_json()
    counts = {m['id']: m['point_count'] for m in data['modes']}
    assert counts == {'linear': 2, 'quadratic': 3, 'cubic': 4}
    assert data['default'] == 'quadratic'


def test_generate_is_reproducible_with_seed(client) -> None:
    first = client.post('/generate', json={'mode': 'cubic', 'seed': 11}).get_json()
    second = client.post('/generate', json={'mode': 'cubic', 'seed': 11}).get_json()
    assert first['success'] is True
    assert first['point_count'] == 4
    assert first['targets'] == second['targets']
    assert first['coefficients'] == {'a': 1.0, 'b': 0.0, 'c': 0.0}


def test_generate_unknown_mode(client) -> None:
    resp = client.post('/generate', json={'mode': 'quartic'})
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False


def test_check(client) -> None:
    resp = client.post('/check', json={
        'mode': 'quadratic',
        'coefficients': {'a': 0, 'b': 0, 'c': 5},
        'targets': [{'x': 3, 'y': 5.3}, [3, 5.5]],
    })
    report = resp.get_json()['report']
    assert report['succeeded'] is False
    assert [r['passed'] for r in report['results']] == [True, False]


def test_check_rejects_out_of_range_coefficient(client) -> None:
    resp = client.post('/check', json={
        'mode': 'linear',
        'coefficients': {'a': 6},
        'targets': [],
    })
    assert resp.status_code == 400


def test_check_rejects_bad_point(client) -> None:
    resp = client.post('/check', json={
        'mode': 'linear',
        'coefficients': {'a': 1},
        'targets': [{'x': 1}],
    })
    assert resp.status_code == 400


def test_path(client) -> None:
    data = client.post('/path', json={
        'mode': 'linear',
        'coefficients': {'a': 1, 'b': 0},
    }).get_json()
    assert data['equation'] == 'y = 1.00x + 0.00'
    assert len(data['points']) == 321
    assert data['svg'].startswith('M ')


def test_render(client) -> None:
    data = client.post('/render', json={
        'mode': 'cubic',
        'coefficients': {'a': 0.2, 'b': -1, 'c': 0},
        'targets': [{'x': 0, 'y': 0}],
        'theme': 'dark',
    }).get_json()
    assert data['image'].startswith('data:image/png;base64,')


def test_linear_ignores_range_of_unused_c(client) -> None:
    resp = client.post('/check', json={
        'mode': 'linear',
        'coefficients': {'a': 2, 'b': 0, 'c': 9},
        'targets': [{'x': 1, 'y': 2}],
    })
    assert resp.status_code == 200
    assert resp.get_json()['report']['succeeded'] is True


def test_quadratic_checks_range_of_c(client) -> None:
    resp = client.post('/check', json={
        'mode': 'quadratic',
        'coefficients': {'a': 1, 'b': 0, 'c': 9},
        'targets': [],
    })
    assert resp.status_code == 400
