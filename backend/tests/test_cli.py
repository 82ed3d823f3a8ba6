"""CLI command tests (flask system / order-types / orders)."""

from orderdesk.models import OrderType, Order, Invoice


def test_order_types_add_list_remove(app, db_session):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["order-types", "add", "Wedding"])
    assert result.exit_code == 0, result.output
    assert "PASS Added order type: Wedding" in result.output

    result = runner.invoke(args=["order-types", "list"])
    assert result.exit_code == 0
    assert result.output.strip().splitlines() == ["Wedding"]

    result = runner.invoke(args=["order-types", "remove", "Wedding"])
    assert result.exit_code == 0
    assert "Removed 1 order type(s)" in result.output
    assert db_session.query(OrderType).count() == 0


def test_order_types_add_duplicate_fails(app, db_session):
    runner = app.test_cli_runner()
    runner.invoke(args=["order-types", "add", "Wedding"])

    result = runner.invoke(args=["order-types", "add", "Wedding"])

    assert result.exit_code != 0
    assert "Error" in result.output


def test_order_types_list_empty(app, db_session):
    result = app.test_cli_runner().invoke(args=["order-types", "list"])
    assert "No order types found." in result.output


def test_orders_list_and_wipe(app, client, created_order, db_session):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["orders", "list"])
    assert result.exit_code == 0
    assert created_order["invoice"]["invoice_number"] in result.output

    result = runner.invoke(args=["orders", "list", "--status", "Paid"])
    assert "No orders found." in result.output

    result = runner.invoke(args=["system", "wipe", "--yes"])
    assert result.exit_code == 0
    assert "Removed 1 order(s) and 1 invoice(s)" in result.output
    assert db_session.query(Order).count() == 0
    assert db_session.query(Invoice).count() == 0


def test_init_db_is_idempotent(app, db_session):
    runner = app.test_cli_runner()
    assert runner.invoke(args=["system", "init-db"]).exit_code == 0
    assert runner.invoke(args=["system", "init-db"]).exit_code == 0
