import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

REPO_ROOT = Path(__file__).resolve().parents[1]
OUTPUT_DIR = REPO_ROOT / "public" / "tours"
OUTPUT_PATH = OUTPUT_DIR / "index.json"
LOG_PATH = OUTPUT_DIR / "tours-log.txt"

LOG_RETENTION_DAYS = int(os.environ.get("TRACKER_LOG_RETENTION_DAYS", "14"))

API_BASE_URL = os.environ.get("TRACKER_API_BASE", "https://groupietrackers.herokuapp.com/api").rstrip("/")
ARTISTS_URL = API_BASE_URL + "/artists"
DATES_URL = API_BASE_URL + "/dates"
LOCATIONS_URL = API_BASE_URL + "/locations"
RELATION_URL = API_BASE_URL + "/relation"

# Unset means no timeout: a hung upstream blocks the startup load.
_timeout = os.environ.get("TRACKER_FETCH_TIMEOUT")
FETCH_TIMEOUT = float(_timeout) if _timeout else None

REQUEST_HEADERS = {
    "User-Agent": "groupie-tracker/0.1 (+https://groupietrackers.herokuapp.com)",
    "Accept": "application/json",
}

DEFAULT_ARTIST_ID = 1
