# workability/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# API Keys
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# Runtime parameters
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
CONCURRENCY = 20
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
ENABLE_AI_ANALYSIS = os.getenv("ENABLE_AI_ANALYSIS", "0").lower() in ("1", "true", "yes", "on")

# Ranking parameters
QUICK_INSIGHT_LIMIT = 3
NEARBY_MILES = 1.0
MEETING_MIN_DOWNLOAD = 25

# File names
INPUT_PATH = os.getenv("INPUT_PATH", "places.csv")
OUTPUT_CSV = os.getenv("OUTPUT_CSV", "scored_places.csv")
