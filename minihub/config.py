import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Server
    PORT = int(os.getenv('PORT', '3000'))

    # Storage
    DATA_PATH = os.getenv('DATA_PATH', 'data.json')

    # Flask
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('FLASK_ENV') == 'development'
