"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Search agent endpoint – never hardcode the key
AGENT_API_URL: str = os.getenv("AGENT_API_URL", "http://localhost:3000/api/agent")
AGENT_API_KEY: str = os.getenv("AGENT_API_KEY", "")
AGENT_ID: str = os.getenv("AGENT_ID", "6986ecdab4092699af3c635c")
SEARCH_QUERY: str = os.getenv(
    "SEARCH_QUERY",
    "Find current backend developer job openings in the United States. "
    "Include job title, company name, location, salary range if available, and application links.",
)

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# HTTP settings (timeouts belong to the transport, not the feed)
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "120"))

# Durable key/value storage for favorites
STORAGE_PATH: Path = Path(
    os.getenv("JOB_SCOUT_STORAGE_PATH", str(Path.home() / ".job_scout" / "storage.json"))
).expanduser()
FAVORITES_STORAGE_KEY: str = "job-favorites"

# Display rules
SALARY_NOT_SPECIFIED: str = "Not specified"
PAGE_TITLE: str = "Backend Dev Job Scout"

# Recency thresholds
NEW_JOB_HOURS: int = 24
WEEK_FILTER_DAYS: int = 7

# Date filter labels shown in the UI, keyed by DateFilter value
DATE_FILTER_LABELS: dict = {
    "all": "All Time",
    "week": "This Week",
    "today": "Today",
}
