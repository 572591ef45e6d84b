"""
Pytest utilities for testing.

This module provides helpers to fake the aiohttp layer so request builders
can be exercised without touching the network.

Usage:
    from yt_api.utils.pytest_utils import mock_aiohttp_session

    async def test_search(self):
        with mock_aiohttp_session(body=json.dumps(payload)) as session:
            result = await SearchRequest(key).q("rust lang")
        params = session.get.call_args.kwargs["params"]
"""

from collections.abc import Iterator
from contextlib import contextmanager
from unittest.mock import AsyncMock, MagicMock, patch


@contextmanager
def mock_aiohttp_session(
    body: str | bytes = "",
    status: int = 200,
    side_effect: BaseException | None = None,
) -> Iterator[MagicMock]:
    """Patch ``aiohttp.ClientSession`` for the duration of the block.

    Args:
        body: Payload returned by ``response.read()``; text is encoded as UTF-8
        status: HTTP status of the fake response
        side_effect: Exception raised when the GET is entered, to simulate
            transport failures

    Yields:
        The fake session; ``session.get.call_args`` holds the URL and params
    """
    mock_response = MagicMock()
    mock_response.status = status
    if isinstance(body, str):
        body = body.encode()
    mock_response.read = AsyncMock(return_value=body)

    mock_session = MagicMock()
    mock_session.__aenter__.return_value = mock_session
    mock_session.__aexit__.return_value = None
    if side_effect is not None:
        mock_session.get.return_value.__aenter__.side_effect = side_effect
    else:
        mock_session.get.return_value.__aenter__.return_value = mock_response
    mock_session.get.return_value.__aexit__.return_value = None

    with patch("aiohttp.ClientSession") as mock_session_class:
        mock_session_class.return_value = mock_session
        yield mock_session
