"""
Engine-wide constants.

Tunables read the environment once at import time, e.g.:
    TFIDF_SEARCH_REQUEST_WINDOW=60 TFIDF_SEARCH_LOG_LEVEL=DEBUG uv run pytest
"""

import os

# Maximum number of documents returned by a single top-documents query
MAX_RESULT_DOCUMENT_COUNT = 5

# Relevance values closer than this are treated as equal when ranking
RELEVANCE_EPSILON = 1e-6

# Number of most recent requests kept by the request queue ("minutes in a day")
REQUEST_WINDOW_SIZE = max(int(os.environ.get("TFIDF_SEARCH_REQUEST_WINDOW", 1440)), 1)

# Level applied by log_duration.configure_logging() when none is given
LOG_LEVEL = os.environ.get("TFIDF_SEARCH_LOG_LEVEL", "WARNING").upper()
