import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    INPUT_FILE: str = "totp.json"
    OUTPUT_DIR: str = "qr"
    ALLOW_SHORT_SECRETS: bool = True
    # Only the log verbosity comes from the environment
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
