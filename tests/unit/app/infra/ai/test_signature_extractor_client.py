"""Testes do client OpenAI de extração (mapeamento de erros do SDK)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from app.infra.ai.health_probe_client import OpenAIHealthProbe
from app.infra.ai.signature_extractor_client import SignatureExtractorClient
from config.settings.ai.openai import OpenAISettings
from utils.errors import UpstreamRejectedError, UpstreamUnavailableError

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _completion(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _mock_openai(*, result: object = None, error: Exception | None = None) -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=result, side_effect=error)
    return client


def _status_error(cls: type[openai.APIStatusError], status_code: int, message: str) -> Exception:
    response = httpx.Response(status_code, request=_REQUEST)
    return cls(message, response=response, body=None)


SETTINGS = OpenAISettings(api_key="sk-test", model="gpt-test", health_model="gpt-cheap")


class TestSignatureExtractorClient:
    @pytest.mark.asyncio
    async def test_returns_message_content(self) -> None:
        mock = _mock_openai(result=_completion('{"name": "Jane"}'))
        client = SignatureExtractorClient(settings=SETTINGS, client=mock)

        assert await client.complete(prompt="Jane") == '{"name": "Jane"}'

        kwargs = mock.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["max_tokens"] == 2048
        assert kwargs["messages"] == [{"role": "user", "content": "Jane"}]

    @pytest.mark.asyncio
    async def test_missing_content_returns_empty_string(self) -> None:
        client = SignatureExtractorClient(settings=SETTINGS, client=_mock_openai(result=_completion(None)))
        assert await client.complete(prompt="Jane") == ""

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self) -> None:
        error = openai.APITimeoutError(request=_REQUEST)
        client = SignatureExtractorClient(settings=SETTINGS, client=_mock_openai(error=error))

        with pytest.raises(UpstreamUnavailableError):
            await client.complete(prompt="Jane")

    @pytest.mark.asyncio
    async def test_server_error_is_unavailable(self) -> None:
        error = _status_error(openai.InternalServerError, 500, "Internal server error")
        client = SignatureExtractorClient(settings=SETTINGS, client=_mock_openai(error=error))

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await client.complete(prompt="Jane")
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("cls", "status_code"),
        [
            (openai.AuthenticationError, 401),
            (openai.PermissionDeniedError, 403),
            (openai.RateLimitError, 429),
        ],
    )
    async def test_auth_and_quota_errors_are_rejected(
        self,
        cls: type[openai.APIStatusError],
        status_code: int,
    ) -> None:
        error = _status_error(cls, status_code, "Incorrect API key provided")
        client = SignatureExtractorClient(settings=SETTINGS, client=_mock_openai(error=error))

        with pytest.raises(UpstreamRejectedError) as exc_info:
            await client.complete(prompt="Jane")
        assert exc_info.value.status_code == status_code
        assert "Incorrect API key provided" in str(exc_info.value)


class TestOpenAIHealthProbe:
    @pytest.mark.asyncio
    async def test_ping_uses_cheap_model_and_small_budget(self) -> None:
        mock = _mock_openai(result=_completion("OK"))
        probe = OpenAIHealthProbe(settings=SETTINGS, client=mock)

        assert await probe.ping() == "OK"

        kwargs = mock.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-cheap"
        assert kwargs["max_tokens"] == 10

    @pytest.mark.asyncio
    async def test_ping_without_choices_is_empty(self) -> None:
        probe = OpenAIHealthProbe(settings=SETTINGS, client=_mock_openai(result=SimpleNamespace(choices=[])))
        assert await probe.ping() == ""

    @pytest.mark.asyncio
    async def test_ping_propagates_sdk_errors(self) -> None:
        error = _status_error(openai.RateLimitError, 429, "Rate limit reached")
        probe = OpenAIHealthProbe(settings=SETTINGS, client=_mock_openai(error=error))

        with pytest.raises(openai.RateLimitError):
            await probe.ping()
