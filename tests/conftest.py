import os, sys, pytest
# Ensure project root is on path so 'leave_api', 'scripts' and 'seeds' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from leave_api import create_app
from leave_api.models.base import load_models
from scripts.seed import seed


@pytest.fixture()
def app_instance(tmp_path):
    # Fresh in-memory database per test, seeded with the fixture benefits/employees
    app = create_app({
        'DATABASE_URL': 'sqlite+pysqlite:///:memory:',
        'OPENAPI_OUTPUT': str(tmp_path / 'swagger-output.json'),
        'TESTING': True,
    })
    store = app.extensions['store']
    with app.app_context():
        load_models().metadata.create_all(store.session.get_bind())
        seed(store.session)
        store.session.commit()
    yield app


@pytest.fixture()
def store(app_instance):
    return app_instance.extensions['store']


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()
