"""Global configuration for the Achievement News bot."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Discord
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "!")

# RetroAchievements Web API
RA_USER = os.getenv("RA_USER")
RA_WEB_API_KEY = os.getenv("RA_WEB_API_KEY")
RA_API_BASE = os.getenv("RA_API_BASE", "https://retroachievements.org/API")
RA_SITE_URL = os.getenv("RA_SITE_URL", "https://retroachievements.org")
RA_TIMEOUT_SECONDS = float(os.getenv("RA_TIMEOUT_SECONDS", "15"))
RA_MAX_ATTEMPTS = int(os.getenv("RA_MAX_ATTEMPTS", "1"))  # 1 = no retries

# YouTube Data API
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
YOUTUBE_API_BASE = os.getenv("YOUTUBE_API_BASE", "https://www.googleapis.com/youtube/v3")
YOUTUBE_TIMEOUT_SECONDS = float(os.getenv("YOUTUBE_TIMEOUT_SECONDS", "15"))

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", Path(os.getenv("LOCALAPPDATA", ".")) / "achievement-news" / "logs"))
LOG_DIR.mkdir(parents=True, exist_ok=True)
