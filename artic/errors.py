import aiohttp


class ArticException(Exception):
    """Base exception for all collection API exceptions"""
    pass


class ClientException(ArticException, aiohttp.ClientError):
    """Something happened in the page client"""
    pass


class NetworkError(ClientException):
    """We could not get a usable response from the remote collection"""
    pass


class ClientResponseError(NetworkError):
    """The response is an error status code"""

    def __init__(self, msg, status=None):
        super().__init__(msg)
        self.status = status


class ClientTimeoutError(NetworkError, aiohttp.ServerTimeoutError):
    """We timed out connecting to the server"""
    pass


class DecodeError(ClientException):
    """We cannot deserialize the response, or it does not have the shape we expect"""
    pass


class InvalidPageNumber(ArticException, ValueError):
    """Page numbers are 1-based"""

    def __init__(self, page_number):
        super().__init__(f"Page numbers start at 1, got {page_number!r}.")
        self.page_number = page_number
