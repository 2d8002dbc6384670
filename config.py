"""
Configuration settings for the Philly Wings Express menu tooling
"""
import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Application configuration"""

    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    PORT = int(os.getenv('PORT', '3001'))

    # Prebuilt SPA and admin pages
    DIST_DIR = os.getenv('DIST_DIR', os.path.join(os.path.dirname(os.path.abspath(__file__)), 'dist'))

    # Firebase settings
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH', 'firebase-credentials.json')
    FIREBASE_CREDENTIALS_JSON = os.getenv('FIREBASE_CREDENTIALS_JSON', '')
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID', 'philly-wings')

    # Local emulator (firebase emulators:start); exported as FIRESTORE_EMULATOR_HOST for emulator clients only
    FIRESTORE_EMULATOR_ADDRESS = os.getenv('FIRESTORE_EMULATOR_ADDRESS', 'localhost:8080')
    USE_EMULATOR = os.getenv('USE_EMULATOR', 'False').lower() == 'true'

    # Platform menu responses
    PLATFORM_MENU_CACHE_CONTROL = os.getenv('PLATFORM_MENU_CACHE_CONTROL', 'public, max-age=300, s-maxage=600')
