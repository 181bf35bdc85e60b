"""
Costing App

Flask application factory. Wires configuration, the database, migrations,
logging and the command line entry points for unit seeding, conversions
and recipe costing.

Usage:
    flask --app app init-db
    flask --app app seed-units
    flask --app app convert 2 pc lb --ingredient 7
    flask --app app ingredient-cost 7 2 pc
    flask --app app recipe-cost 3
"""

import click
from flask import Flask, current_app
from flask_migrate import Migrate

from config import get_config
from models import db
from services import (
    CostingError,
    calculate_ingredient_cost,
    calculate_recipe_cost,
    load_context,
    resolve_conversion,
    seed_standard_units,
)
from utils import configure_logging, format_money

migrate = Migrate()


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    configure_logging(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)

    register_commands(app)
    return app


def _restaurant_id(restaurant):
    return restaurant if restaurant is not None else current_app.config['RESTAURANT_ID']


def register_commands(app):
    """Attach the costing CLI commands to app."""

    @app.cli.command('init-db')
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo('Database initialized')

    @app.cli.command('seed-units')
    @click.option('--restaurant', type=int, default=None, help='Restaurant id')
    def seed_units(restaurant):
        """Add the standard unit catalog."""
        added = seed_standard_units(_restaurant_id(restaurant))
        click.echo(f'Added {added} units')

    @app.cli.command('convert')
    @click.argument('quantity')
    @click.argument('from_unit')
    @click.argument('to_unit')
    @click.option('--ingredient', type=int, default=None, help='Ingredient id for specific rules')
    @click.option('--restaurant', type=int, default=None, help='Restaurant id')
    def convert(quantity, from_unit, to_unit, ingredient, restaurant):
        """Convert QUANTITY from FROM_UNIT to TO_UNIT."""
        context = load_context(_restaurant_id(restaurant))
        try:
            result = resolve_conversion(context, quantity, from_unit, to_unit, ingredient)
        except CostingError as e:
            raise click.ClickException(str(e))
        if result.failed:
            raise click.ClickException(f'No conversion from {from_unit} to {to_unit}')
        click.echo(f'{quantity} {from_unit} = {result.value} {to_unit} ({result.method})')

    @app.cli.command('ingredient-cost')
    @click.argument('ingredient_id', type=int)
    @click.argument('quantity')
    @click.argument('unit')
    @click.option('--restaurant', type=int, default=None, help='Restaurant id')
    def ingredient_cost(ingredient_id, quantity, unit, restaurant):
        """Cost QUANTITY UNIT of one ingredient."""
        context = load_context(_restaurant_id(restaurant))
        try:
            result = calculate_ingredient_cost(context, ingredient_id, quantity, unit)
        except CostingError as e:
            raise click.ClickException(str(e))
        click.echo(f"${result['cost']}")
        if result['warning']:
            click.echo(f"Warning: {result['warning']}", err=True)

    @app.cli.command('recipe-cost')
    @click.argument('recipe_id', type=int)
    @click.option('--restaurant', type=int, default=None, help='Restaurant id')
    def recipe_cost(recipe_id, restaurant):
        """Show cost, food cost % and margin % for a recipe."""
        context = load_context(_restaurant_id(restaurant))
        try:
            result = calculate_recipe_cost(context, recipe_id)
        except CostingError as e:
            raise click.ClickException(str(e))
        for line in result['lines']:
            flag = ' !' if line['conversion_warning'] else ''
            click.echo(
                f"  ingredient {line['ingredient_id']}: {line['quantity']} {line['unit']}"
                f" -> ${format_money(line['line_cost'])}{flag}"
            )
        click.echo(f"Total cost: ${format_money(result['total_cost'])}")
        click.echo(f"Food cost: {format_money(result['food_cost_percent'])}%")
        click.echo(f"Margin: {format_money(result['margin_percent'])}%")
        if result['has_warnings']:
            click.echo('Some lines are estimates (missing conversions)', err=True)
