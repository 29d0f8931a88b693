import os


# ==== remote collection ====
ARTIC_API_URL = os.getenv("ARTIC_API_URL", "https://api.artic.edu/api/v1")
ARTWORKS_ROUTE = "/artworks"
# the remote source fixes its own page size; this must match it
PAGE_SIZE = int(os.getenv("PAGE_SIZE", 12))

# ---- http ----
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", 30))  # seconds, whole request

# ---- page cache ----
# 0 disables the cache: every navigation re-fetches its page
PAGE_CACHE_TTL = int(os.getenv("PAGE_CACHE_TTL", 0))
PAGE_CACHE_SIZE = int(os.getenv("PAGE_CACHE_SIZE", 64))
