import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Study set configuration
DEFAULT_SET_NAME = os.getenv("DEFAULT_SET_NAME", "Default Set")

# Timer configuration
TIMER_DEFAULT_HOURS = int(os.getenv("TIMER_DEFAULT_HOURS", "0"))
TIMER_DEFAULT_MINUTES = int(os.getenv("TIMER_DEFAULT_MINUTES", "5"))
TIMER_DEFAULT_SECONDS = int(os.getenv("TIMER_DEFAULT_SECONDS", "0"))
TIMER_TICK_SECONDS = float(os.getenv("TIMER_TICK_SECONDS", "1"))

# App configuration
APP_TITLE = "Studious API"
APP_VERSION = "1.0"
APP_DESCRIPTION = "FastAPI backend for flashcards, notes and a study timer"

# CORS origins
# Note: When allow_credentials=True, you cannot use wildcard "*" for origins
# You must explicitly list allowed origins
CORS_ORIGINS_ENV = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = [
    "http://localhost:8000",
    "http://10.0.2.2:8000",      # Android emulator
    "http://127.0.0.1:8000",
    "http://localhost:8081",     # Expo dev server
]
# Add any additional origins from environment variable
if CORS_ORIGINS_ENV:
    CORS_ORIGINS.extend([origin.strip() for origin in CORS_ORIGINS_ENV.split(",")])

CORS_CREDENTIALS = True
CORS_METHODS = ["*"]
CORS_HEADERS = ["*"]
