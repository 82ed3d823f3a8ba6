# Overview: Flask CLI command groups for bootstrap, inspection, and maintenance.

# backend/orderdesk/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv and export DATABASE_URL.
# - Set FLASK_APP to wsgi.py (PowerShell: $env:FLASK_APP="wsgi.py").
# - Use: python -m flask <group> <command> [options]
#
# System bootstrap/repair:
# - python -m flask system init-db
#   Create any missing tables (idempotent; prefer `flask db upgrade` in production).
# - python -m flask system reset-db --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
# - python -m flask system wipe --yes
#   Delete all orders and invoices but keep order types.
#
# Order types:
# - python -m flask order-types list
# - python -m flask order-types add "Wedding"
# - python -m flask order-types remove "Wedding"
#
# Orders:
# - python -m flask orders list [--status "Not Paid"]

import click
from flask.cli import with_appcontext

from .extensions import db
from .models import Order, Invoice, PAYMENT_STATUSES
from .services import order_type_service
from .validation import ValidationError, StoreError


@click.group('system')
def system_group():
    """System bootstrap and repair commands."""


@system_group.command('init-db')
@with_appcontext
def init_db():
    """Create all tables that do not exist yet."""
    db.create_all()
    click.echo("PASS Tables created.")


@system_group.command('reset-db')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_db(yes):
    """
    DANGER: Drop all tables and recreate schema.

    This will DELETE ALL DATA!
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    click.echo("DELETE  Dropping all tables...")
    db.drop_all()

    click.echo("BUILD  Creating all tables...")
    db.create_all()

    click.echo("PASS Database reset complete.")


@system_group.command('wipe')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def wipe_data(yes):
    """Delete all orders and invoices; order types are kept."""
    if not yes:
        click.confirm("WARN This will DELETE all orders and invoices. Are you sure?", abort=True)

    invoices = db.session.query(Invoice).delete(synchronize_session=False)
    orders = db.session.query(Order).delete(synchronize_session=False)
    db.session.commit()

    click.echo(f"PASS Removed {orders} order(s) and {invoices} invoice(s).")


@click.group('order-types')
def order_types_group():
    """Order-type registry commands."""


@order_types_group.command('list')
@with_appcontext
def list_order_types():
    """List all order types."""
    names = order_type_service.list_order_types()
    if not names:
        click.echo("No order types found.")
        return
    for name in names:
        click.echo(name)


@order_types_group.command('add')
@click.argument('name')
@with_appcontext
def add_order_type(name):
    """Add an order type."""
    try:
        order_type = order_type_service.create_order_type(name)
    except (ValidationError, StoreError) as e:
        raise click.ClickException(str(e))
    click.echo(f"PASS Added order type: {order_type.name} (ID: {order_type.id})")


@order_types_group.command('remove')
@click.argument('name')
@with_appcontext
def remove_order_type(name):
    """Delete an order type by name."""
    deleted = order_type_service.delete_order_type(name)
    click.echo(f"PASS Removed {deleted} order type(s) named '{name}'")


@click.group('orders')
def orders_group():
    """Order inspection commands."""


@orders_group.command('list')
@click.option('--status', type=click.Choice(PAYMENT_STATUSES), default=None, help='Filter by payment status')
@with_appcontext
def list_orders(status):
    """List orders with their invoice numbers."""
    query = db.session.query(Order)
    if status:
        query = query.filter(Order.payment_status == status)
    orders = query.all()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo("\n" + "="*80)
    click.echo(f"{'ID':<6} {'Client':<24} {'Type':<16} {'Deadline':<12} {'Total':>10} {'Status':<10} {'Invoice'}")
    click.echo("="*80)

    for o in orders:
        invoice_number = o.invoices[0].invoice_number if o.invoices else "-"
        click.echo(
            f"{o.id:<6} {o.client_name[:24]:<24} {o.order_type[:16]:<16} {o.deadline.isoformat():<12} "
            f"{o.total_amount:>10} {o.payment_status:<10} {invoice_number}"
        )

    click.echo("="*80 + "\n")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(system_group)
    app.cli.add_command(order_types_group)
    app.cli.add_command(orders_group)
