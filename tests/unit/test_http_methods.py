r"""Unit tests for the module-level HTTP method functions."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

from avoca import (
    Client,
    ClientConfig,
    Context,
    RequestCreationError,
    TransportError,
    delete,
    get,
    patch as patch_request,
    post,
    put,
)
from avoca.policy import retry_on_server_errors
from avoca.retrier import MaxAttemptsRetrier
from tests.helpers import DUMMY_HEADERS, DUMMY_REQUEST_BODY, TEST_URL, RecordingExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

HTTP_METHODS = [
    pytest.param(get, "GET", id="GET"),
    pytest.param(post, "POST", id="POST"),
    pytest.param(put, "PUT", id="PUT"),
    pytest.param(patch_request, "PATCH", id="PATCH"),
    pytest.param(delete, "DELETE", id="DELETE"),
]
HTTP_METHODS_WITH_BODY = [
    pytest.param(post, id="POST"),
    pytest.param(put, id="PUT"),
    pytest.param(patch_request, id="PATCH"),
]

RETRY_CONFIG = ClientConfig(
    retrier=MaxAttemptsRetrier(max_attempts=4),
    retry_policy=retry_on_server_errors,
)


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_with_executor(
    context: Context, method_func: Callable[..., httpx.Response], method: str
) -> None:
    executor = RecordingExecutor([200])
    response = method_func(context, TEST_URL, headers=DUMMY_HEADERS, executor=executor)
    assert response.status_code == 200
    assert executor.requests[0].method == method
    assert executor.requests[0].headers == httpx.Headers(DUMMY_HEADERS)
    assert executor.closed is False


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_with_client(
    context: Context, method_func: Callable[..., httpx.Response], method: str
) -> None:
    executor = RecordingExecutor([500, 500, 500, 200])
    with Client(config=RETRY_CONFIG, executor=executor) as client:
        response = method_func(context, TEST_URL, client=client)
    assert response.status_code == 200
    assert executor.call_count == 4
    assert executor.requests[0].method == method


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_retryable_status_exhausted(
    context: Context, method_func: Callable[..., httpx.Response], method: str
) -> None:
    executor = RecordingExecutor([500])
    response = method_func(context, TEST_URL, config=RETRY_CONFIG, executor=executor)
    assert response.status_code == 500
    assert executor.call_count == 4


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_transport_failure_exhausted(
    context: Context, method_func: Callable[..., httpx.Response], method: str
) -> None:
    executor = RecordingExecutor([httpx.ConnectError("refused")])
    with pytest.raises(TransportError, match=rf"{method} request to {TEST_URL} failed"):
        method_func(context, TEST_URL, config=RETRY_CONFIG, executor=executor)
    assert executor.call_count == 4


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_cancelled_context(
    cancelled_context: Context, method_func: Callable[..., httpx.Response], method: str
) -> None:
    executor = RecordingExecutor([200])
    with pytest.raises(RequestCreationError, match=r"request creation failed: context cancelled"):
        method_func(cancelled_context, TEST_URL, config=RETRY_CONFIG, executor=executor)
    assert executor.call_count == 0


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_none_context(
    method_func: Callable[..., httpx.Response], method: str
) -> None:
    executor = RecordingExecutor([200])
    with pytest.raises(RequestCreationError):
        method_func(None, TEST_URL, executor=executor)
    assert executor.call_count == 0


@pytest.mark.parametrize("method_func", HTTP_METHODS_WITH_BODY)
def test_http_method_replays_body(
    context: Context, method_func: Callable[..., httpx.Response]
) -> None:
    executor = RecordingExecutor([httpx.ConnectError("refused"), 500, 200])
    body = io.BytesIO(DUMMY_REQUEST_BODY)
    response = method_func(context, TEST_URL, body=body, config=RETRY_CONFIG, executor=executor)
    assert response.status_code == 200
    assert executor.bodies == [DUMMY_REQUEST_BODY] * 3
    assert body.closed


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_client_with_config_raises(
    context: Context, method_func: Callable[..., httpx.Response], method: str
) -> None:
    with (
        Client(executor=RecordingExecutor([200])) as client,
        pytest.raises(ValueError, match=r"cannot be used together with client"),
    ):
        method_func(context, TEST_URL, client=client, config=RETRY_CONFIG)


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_default_client_is_closed(
    context: Context, method_func: Callable[..., httpx.Response], method: str
) -> None:
    mock_client = Mock(spec=Client, request=Mock(return_value=Mock(spec=httpx.Response)))
    with patch("avoca.http_logic.Client", return_value=mock_client) as client_class:
        method_func(context, TEST_URL, config=RETRY_CONFIG)
    client_class.assert_called_once_with(config=RETRY_CONFIG, executor=None)
    mock_client.request.assert_called_once()
    assert mock_client.request.call_args.args[1] == method
    mock_client.close.assert_called_once_with()


@pytest.mark.parametrize(("method_func", "method"), HTTP_METHODS)
def test_http_method_given_client_is_not_closed(
    context: Context, method_func: Callable[..., httpx.Response], method: str
) -> None:
    mock_client = Mock(spec=Client, request=Mock(return_value=Mock(spec=httpx.Response)))
    method_func(context, TEST_URL, client=mock_client)
    mock_client.close.assert_not_called()
