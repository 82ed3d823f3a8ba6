"""
Pytest fixtures for OrderDesk backend tests.

Provides an in-memory SQLite app, test client, per-test table cleanup and
small factories for orders.
"""

import pytest
from orderdesk import create_app
from orderdesk.extensions import db
from orderdesk.models import OrderType


FRONTEND_ORIGIN = "http://localhost:3000"


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'FRONTEND_URL': FRONTEND_ORIGIN,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app, db_session):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create fresh database for each test."""
    with app.app_context():
        # Clear all data but keep schema
        meta = db.metadata
        for table in reversed(meta.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()

        yield db.session

        # Cleanup after test
        db.session.rollback()


@pytest.fixture(scope='function')
def order_payload():
    """Valid POST /orders body; tests override fields as needed."""
    def _build(**overrides):
        payload = {
            "order_type": "Wedding",
            "deadline": "2026-11-02",
            "total_amount": 100,
            "client_name": "Jane Doe",
            "client_phone": "+254700000000",
            "notes": "Three tiers",
        }
        payload.update(overrides)
        return payload
    return _build


@pytest.fixture(scope='function')
def created_order(client, order_payload):
    """Create an order through the API and return the {order, invoice} body."""
    response = client.post('/orders', json=order_payload())
    assert response.status_code == 201, response.get_json()
    return response.get_json()


@pytest.fixture(scope='function')
def order_types(db_session):
    """Seed two order types."""
    rows = [OrderType(name="Wedding"), OrderType(name="Birthday")]
    db_session.add_all(rows)
    db_session.commit()
    return rows
