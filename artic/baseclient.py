import abc
import asyncio
import logging

import aiohttp

from .errors import ClientException, ClientResponseError, ClientTimeoutError, DecodeError, NetworkError


class BaseClient(abc.ABC):
    SERVICE_BASE: str = ...
    logger: logging.Logger = ...

    def __init__(self, http: aiohttp.ClientSession):
        self.http = http

    async def request(self, method: str, route: str, **kwargs):
        """Performs an unauthenticated request against the service and returns the decoded JSON body."""
        try:
            async with self.http.request(method, f"{self.SERVICE_BASE}{route}", **kwargs) as resp:
                self.logger.debug(f"{method} {self.SERVICE_BASE}{route} {kwargs.get('params')} returned {resp.status}")
                if not 199 < resp.status < 300:
                    data = (await resp.read()).decode(errors="replace")
                    self.logger.warning(
                        f"{method} {self.SERVICE_BASE}{route} returned {resp.status} {resp.reason}\n{data}")
                    raise ClientResponseError(
                        f"The collection API returned an error: {resp.status}: {resp.reason}", status=resp.status)
                try:
                    data = await resp.json()
                except (aiohttp.ContentTypeError, ValueError, TypeError):
                    data = (await resp.read()).decode(errors="replace")
                    self.logger.warning(
                        f"{method} {self.SERVICE_BASE}{route} response could not be deserialized:\n{data}")
                    raise DecodeError(f"Could not deserialize collection API response: {data}")
        except ClientException:
            raise
        except (aiohttp.ServerTimeoutError, asyncio.TimeoutError):
            self.logger.warning(f"Request timeout: {method} {self.SERVICE_BASE}{route}")
            raise ClientTimeoutError("Timed out connecting to the collection API. Please try again in a few minutes.")
        except aiohttp.ClientError as e:
            self.logger.warning(f"Request failed: {method} {self.SERVICE_BASE}{route}: {e!r}")
            raise NetworkError(f"Could not reach the collection API: {e}") from e
        return data

    async def get(self, route: str, **kwargs):
        return await self.request('GET', route, **kwargs)

    async def close(self):
        await self.http.close()
