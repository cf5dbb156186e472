from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_bcrypt import Bcrypt
from flask_cors import CORS

from jobboard.services.identity import GoogleIdentityProvider
from jobboard.services.storage import ResumeStorage

cors = CORS()

db = SQLAlchemy()
migrate = Migrate()

# login manager for handling JWTs
jwt = JWTManager()

bcrypt = Bcrypt()

# external collaborators, replaceable in tests
identity_provider = GoogleIdentityProvider()
resume_storage = ResumeStorage()
