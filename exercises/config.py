"""
Central Configuration File (SSOT).
"""

# --- Business Rules ---
INITIAL_BALANCE: int = 1000

# --- Program Settings ---
FIZZBUZZ_START: int = 1
FIZZBUZZ_STOP: int = 100  # inclusive

# Message catalogue locale; switchable from the main menu
LANGUAGE = "en"
SUPPORTED_LANGUAGES = {
    "en": "English",
    "ja": "日本語",
}

# --- Logging ---
# stdout is reserved for program output; log records go to stderr
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"
