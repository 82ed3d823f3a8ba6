# Overview: Shared store client and migration handle, bound to the app in create_app().

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

# One session per app context; every service writes through db.session
db = SQLAlchemy()
migrate = Migrate()
