"""
Application Factory

Wires the Flask app, database and migrations around the coaching core.
The HTTP surface is limited to a health check; the core is used through
the services package and the CLI commands registered here.
"""

import logging
import sqlite3

import click
from flask import Flask, jsonify
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine

from config import get_config
from models import db
from services import recompute_recipe_cache, recompute_all_caches

migrate = Migrate()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    # Enable SQLite foreign key enforcement
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    logging.getLogger().setLevel(level)


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    configure_logging(app)
    db.init_app(app)
    migrate.init_app(app, db)

    @app.route('/health')
    def health():
        db.session.execute(db.text('SELECT 1'))
        return jsonify({'status': 'ok'})

    @app.cli.command('init-db')
    def init_db_command():
        """Create all tables."""
        db.create_all()
        click.echo('Database initialized.')

    @app.cli.command('recompute-nutrition')
    @click.option('--recipe-id', type=int, default=None, help='Only rebuild this recipe.')
    def recompute_nutrition_command(recipe_id):
        """Rebuild recipe nutrition caches."""
        if recipe_id is not None:
            values = recompute_recipe_cache(recipe_id)
            click.echo(f"Recipe {recipe_id}: {values['nutrition_calories']} kcal")
        else:
            count = recompute_all_caches()
            click.echo(f'Recomputed {count} recipes.')

    return app


if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
