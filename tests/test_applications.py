from tests.test_utils_seed import application_count

MISSING = 'Missing required fields: leave_start_date, leave_end_date, and employeeId.'


def test_create_single_application_returns_array(client):
    resp = client.post('/applications', json={
        'leave_start_date': '2024-11-01', 'leave_end_date': '2024-11-10', 'employeeId': 2,
    })
    assert resp.status_code == 201
    body = resp.get_json()
    assert isinstance(body, list) and len(body) == 1
    created = body[0]
    assert created['leave_start_date'] == '2024-11-01'
    assert created['leave_end_date'] == '2024-11-10'
    assert created['employeeId'] == 2
    assert isinstance(created['id'], int)


def test_create_accepts_iso_timestamps(client):
    resp = client.post('/applications', json={
        'leave_start_date': '2024-11-01T00:00:00.000Z', 'leave_end_date': '2024-11-10T00:00:00Z', 'employeeId': 1,
    })
    assert resp.status_code == 201
    assert resp.get_json()[0]['leave_start_date'] == '2024-11-01'


def test_create_batch_preserves_order(client, store):
    batch = [
        {'leave_start_date': '2024-11-01', 'leave_end_date': '2024-11-02', 'employeeId': 1},
        {'leave_start_date': '2024-12-01', 'leave_end_date': '2024-12-02', 'employeeId': 2},
        {'leave_start_date': '2025-01-01', 'leave_end_date': '2025-01-02', 'employeeId': 1},
    ]
    resp = client.post('/applications', json=batch)
    assert resp.status_code == 201
    body = resp.get_json()
    assert [a['leave_start_date'] for a in body] == ['2024-11-01', '2024-12-01', '2025-01-01']
    assert [a['employeeId'] for a in body] == [1, 2, 1]
    assert application_count(store) == 3


def test_empty_body_rejected(client):
    for payload in (None, {}, []):
        resp = client.post('/applications', json=payload)
        assert resp.status_code == 400
        assert resp.get_json()['message'] == 'Request body cannot be empty.'


def test_missing_field_rejects_whole_batch(client, store):
    bad = {'leave_start_date': '2024-11-01', 'employeeId': 2}
    batch = [
        {'leave_start_date': '2024-11-01', 'leave_end_date': '2024-11-10', 'employeeId': 1},
        bad,
    ]
    resp = client.post('/applications', json=batch)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body['message'] == MISSING
    assert body['data'] == bad
    assert application_count(store) == 0


def test_unknown_employee_rejects_whole_batch(client, store):
    batch = [
        {'leave_start_date': '2024-11-01', 'leave_end_date': '2024-11-10', 'employeeId': 1},
        {'leave_start_date': '2024-11-01', 'leave_end_date': '2024-11-10', 'employeeId': 999},
    ]
    resp = client.post('/applications', json=batch)
    assert resp.status_code == 400
    assert resp.get_json() == {'message': 'Employee ID 999 does not exist.'}
    assert application_count(store) == 0


def test_zero_employee_id_counts_as_missing(client):
    resp = client.post('/applications', json={
        'leave_start_date': '2024-11-01', 'leave_end_date': '2024-11-10', 'employeeId': 0,
    })
    assert resp.status_code == 400
    assert resp.get_json()['message'] == MISSING


def test_invalid_date_rejected(client, store):
    item = {'leave_start_date': 'next tuesday', 'leave_end_date': '2024-11-10', 'employeeId': 1}
    resp = client.post('/applications', json=item)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body['message'] == 'Invalid date for leave_start_date.'
    assert body['data'] == item
    assert application_count(store) == 0


def test_huge_employee_id_is_unknown(client, store):
    huge = 10 ** 20
    resp = client.post('/applications', json={
        'leave_start_date': '2024-11-01', 'leave_end_date': '2024-11-10', 'employeeId': huge,
    })
    assert resp.status_code == 400
    assert resp.get_json() == {'message': f'Employee ID {huge} does not exist.'}
    assert application_count(store) == 0


def test_offset_timestamps_use_utc_date(client):
    resp = client.post('/applications', json={
        'leave_start_date': '2024-11-01T23:00:00-05:00', 'leave_end_date': '2024-11-10T01:00:00+03:00', 'employeeId': 1,
    })
    assert resp.status_code == 201
    created = resp.get_json()[0]
    assert created['leave_start_date'] == '2024-11-02'
    assert created['leave_end_date'] == '2024-11-09'
