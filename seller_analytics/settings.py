import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Logging ---
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Money Handling ---
# All revenue, profit, cost and bonus values are rounded to this many decimals.
MONEY_DECIMALS = int(os.getenv("MONEY_DECIMALS", "2"))

# --- Shared Business Logic ---
# Maximum number of entries kept in a seller's top products list.
TOP_PRODUCTS_LIMIT = int(os.getenv("TOP_PRODUCTS_LIMIT", "10"))

# Bonus multipliers applied to profit, by rank bucket.
# "first" is rank 0, "podium" is ranks 1 and 2, "default" is everyone else
# except the last-ranked seller, who always gets nothing.
BONUS_RATES = {
    "first": float(os.getenv("BONUS_RATE_FIRST", "0.15")),
    "podium": float(os.getenv("BONUS_RATE_PODIUM", "0.10")),
    "default": float(os.getenv("BONUS_RATE_DEFAULT", "0.05")),
}
