# enex2mf/config.py

import os
from dotenv import load_dotenv

from enex2mf.parsers.events import DEFAULT_CHUNK_SIZE

# Load environment variables from the .env file into the system environment
load_dotenv()

OUTPUT_FORMATS = ("mindforger", "frontmatter")


def _int_from_env(name: str, default: int) -> int:
    # Bad values fall back to the default instead of failing at import time
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Number of bytes handed to the XML tokenizer per read
CHUNK_SIZE = _int_from_env("ENEX2MF_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)

# Title written for notes that have none
DEFAULT_TITLE = os.getenv("ENEX2MF_DEFAULT_TITLE") or "untitled"

# Output format used by `enex2mf convert run` when --format is not given
DEFAULT_FORMAT = os.getenv("ENEX2MF_FORMAT", "mindforger")
if DEFAULT_FORMAT not in OUTPUT_FORMATS:
    DEFAULT_FORMAT = "mindforger"
