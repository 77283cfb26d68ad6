import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./travel_journal.db")

# Secret key for JWT
SECRET_KEY = os.environ.get(
    "JWT_SECRET_KEY", "b3f1c0a9d7e24f6a8c5e19d2f04a7b6c3e8d1f2a9b0c4d7e6f5a3b2c1d0e9f8a"
)
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(
    os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)
)  # 1 day

SESSION_COOKIE_NAME = os.environ.get("SESSION_COOKIE_NAME", "session_token")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE", "server.log")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
