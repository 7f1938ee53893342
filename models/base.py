"""
Database Base Module

Creates the SQLAlchemy instance shared by every model. Kept apart from the
models so services and the app factory can import it without cycles.
"""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

# Constraint names are fixed so SQLite batch migrations can address them
NAMING_CONVENTION = {
    'ix': 'ix_%(table_name)s_%(column_0_name)s',
    'uq': 'uq_%(table_name)s_%(column_0_name)s',
    'ck': 'ck_%(table_name)s_%(constraint_name)s',
    'fk': 'fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s',
    'pk': 'pk_%(table_name)s',
}

# Initialized with the Flask app in app.create_app
db = SQLAlchemy(metadata=MetaData(naming_convention=NAMING_CONVENTION))
