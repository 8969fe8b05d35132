import os

from dotenv import load_dotenv

load_dotenv()

SUPPORTED_LOCATIONS = {
    "tr": "Turkey",
    "us": "United States",
    "gb": "United Kingdom",
    "de": "Germany",
    "fr": "France",
    "es": "Spain",
    "it": "Italy",
    "nl": "Netherlands",
    "se": "Sweden",
    "no": "Norway",
    "dk": "Denmark",
    "fi": "Finland",
    "pl": "Poland",
    "br": "Brazil",
    "mx": "Mexico",
    "ar": "Argentina",
    "ca": "Canada",
    "au": "Australia",
    "jp": "Japan",
    "kr": "South Korea",
}

class Settings:
    """Process configuration, read once from the environment (and `.env`)."""
    SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
    SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 5000))

    # Debug copy of the current bearer token, never read back
    TOKEN_FILE_PATH = os.getenv("TOKEN_FILE_PATH", "token.txt")
