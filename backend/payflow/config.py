import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL") or "gpt-4o-mini"
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
# Unset means the upstream call may block for as long as it takes
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT")) if os.getenv("OPENAI_TIMEOUT") else None

LLM_TEMPERATURE = 0.2
MIN_NARRATIVE_LENGTH = 10

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:8000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
