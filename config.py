import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv() # load variables from .env


def _mysql_uri():
    db_host = os.getenv('DB_HOST', '127.0.0.1')
    db_user = os.getenv('DB_USER', 'root')
    db_password = os.getenv('DB_PASSWORD')
    db_name = os.getenv('DB_NAME', 'recruitment')
    return (
        f"mysql+pymysql://{db_user}@{db_host}/{db_name}"
        if not db_password else
        f"mysql+pymysql://{db_user}:{db_password}@{db_host}/{db_name}"
    )


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'change-me')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET', SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=30)
    JWT_TOKEN_LOCATION = ['headers']

    DB_HOST = os.getenv('DB_HOST', '127.0.0.1')
    DB_USER = os.getenv('DB_USER', 'root')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME', 'recruitment')

    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or _mysql_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    GOOGLE_CLIENT_ID = os.getenv('GOOGLE_CLIENT_ID')
    GOOGLE_USERINFO_URL = 'https://www.googleapis.com/oauth2/v3/userinfo'
    IDENTITY_TIMEOUT = float(os.getenv('IDENTITY_TIMEOUT', '10'))

    CLIENT_ORIGIN = os.getenv('CLIENT_ORIGIN', 'http://localhost:5173')
    PORT = int(os.getenv('PORT', '5000'))

    CLOUDINARY_CLOUD_NAME = os.getenv('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.getenv('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.getenv('CLOUDINARY_API_SECRET')

    RESUME_MAX_BYTES = 10 * 1024 * 1024
    RESUME_URL_TTL = 3600
    # whole multipart body, leaves room for the form envelope around the file
    MAX_CONTENT_LENGTH = RESUME_MAX_BYTES + 1024 * 1024

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    JWT_SECRET_KEY = 'test-jwt-secret-with-enough-length-for-hs256'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    BCRYPT_LOG_ROUNDS = 4
    CLOUDINARY_CLOUD_NAME = 'test-cloud'
    CLOUDINARY_API_KEY = 'test-key'
    CLOUDINARY_API_SECRET = 'test-secret'
    LOG_LEVEL = 'WARNING'
