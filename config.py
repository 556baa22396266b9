import os
import sys
from dotenv import load_dotenv

load_dotenv()

APP_NAME = "Task Tracker API"
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Detect environment
ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()
IS_PRODUCTION = ENVIRONMENT == "production"

# API Configuration
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8080"))
API_WORKERS = int(os.getenv("API_WORKERS", "1"))

# Tasks live in process memory, so every request must reach the same process
if API_WORKERS != 1:
    print(f"\n⚠️  WARNING: API_WORKERS={API_WORKERS} ignored, the task store is in-memory")
    print("   Running with a single worker process.\n")
    API_WORKERS = 1

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "")
LOG_JSON = os.getenv("LOG_JSON", "false").lower() == "true"

# CORS Configuration with validation
ALLOWED_ORIGINS_STR = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:3000,http://localhost:8080,http://127.0.0.1:8080"
)
ALLOWED_ORIGINS = [origin.strip() for origin in ALLOWED_ORIGINS_STR.split(",") if origin.strip()]

if "*" in ALLOWED_ORIGINS:
    if IS_PRODUCTION:
        print("=" * 70)
        print("CRITICAL ERROR: Wildcard CORS (*) not allowed in production!")
        print("=" * 70)
        print("\nSet specific origins in your .env file:")
        print("  ALLOWED_ORIGINS=https://yourdomain.com,https://app.yourdomain.com")
        print("\n" + "=" * 70)
        sys.exit(1)
    else:
        print("\n⚠️  WARNING: Wildcard CORS (*) detected in development mode")
        print("   This should NOT be used in production!\n")
