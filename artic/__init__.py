from .errors import (
    ArticException, ClientException, ClientResponseError, ClientTimeoutError, DecodeError, InvalidPageNumber,
    NetworkError,
)
from .fetcher import CachedPageFetcher, FetchResult, PageFetcher, create_fetcher
from .models import Artwork, Page
