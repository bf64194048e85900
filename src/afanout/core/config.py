r"""Default values for the retry policy and error classification."""

from __future__ import annotations

__all__ = ["DEFAULT_BASE_DELAY", "DEFAULT_MAX_RETRIES", "RATE_LIMIT_TOKEN"]

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Default base delay in seconds for rate-limit backoff
# Wait time = base_delay * (2 ** attempt)
# With 0.1: 1st retry waits 0.1s, 2nd waits 0.2s, 3rd waits 0.4s
DEFAULT_BASE_DELAY = 0.1

# Substring of an error message that marks the failure as rate limited
# (HTTP 429 Too Many Requests)
RATE_LIMIT_TOKEN = "429"
