"""模型提供方：消息整形、文本提取、错误包装、工厂函数"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from anthropic.types import Message
from autogen_core.models import CreateResult, RequestUsage, SystemMessage, UserMessage
from openai.types.chat import ChatCompletion

from config import model_client, settings
from config.model_client import ClaudeProvider, OpenAIProvider, create_completion_provider
from utils.errors import ConfigurationError, GenerationError


def _result(content) -> CreateResult:
    return CreateResult(
        finish_reason="stop",
        content=content,
        usage=RequestUsage(prompt_tokens=0, completion_tokens=0),
        cached=False,
    )


def _mock_client(content="export const A = 1;"):
    client = MagicMock()
    client.create = AsyncMock(return_value=_result(content))
    client.close = AsyncMock()
    return client


# ---------------------------------------------------------------------------
# 消息整形
# ---------------------------------------------------------------------------


class TestMessageShaping:
    def test_openai_inline_system(self):
        messages = OpenAIProvider(_mock_client()).build_messages("SYS", ["task 1", "task 2"])
        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == "SYS"
        assert [m.content for m in messages[1:]] == ["task 1", "task 2"]
        assert all(isinstance(m, UserMessage) for m in messages[1:])

    def test_claude_single_user_turn(self):
        messages = ClaudeProvider(_mock_client()).build_messages("SYS", ["task 1", "task 2"])
        assert len(messages) == 2
        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == "SYS"
        assert isinstance(messages[1], UserMessage)
        assert messages[1].content == "task 1\n\ntask 2"


# ---------------------------------------------------------------------------
# complete
# ---------------------------------------------------------------------------


class TestComplete:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider_cls", [OpenAIProvider, ClaudeProvider])
    async def test_returns_text(self, provider_cls):
        client = _mock_client("const x = 1;")
        provider = provider_cls(client)
        assert await provider.complete("SYS", ["do it"]) == "const x = 1;"
        client.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_remote_failure_wrapped(self):
        client = _mock_client()
        client.create.side_effect = RuntimeError("rate limited")
        provider = ClaudeProvider(client)

        with pytest.raises(GenerationError) as exc_info:
            await provider.complete("SYS", ["do it"])

        assert exc_info.value.provider == "Claude"
        assert "rate limited" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_non_text_content(self):
        provider = OpenAIProvider(_mock_client(content=[]))
        with pytest.raises(GenerationError, match="非文本"):
            await provider.complete("SYS", ["do it"])

    @pytest.mark.asyncio
    async def test_requires_task(self):
        client = _mock_client()
        with pytest.raises(GenerationError):
            await OpenAIProvider(client).complete("SYS", [])
        client.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_close(self):
        client = _mock_client()
        await OpenAIProvider(client).close()
        client.close.assert_awaited_once()


# ---------------------------------------------------------------------------
# 工厂
# ---------------------------------------------------------------------------


class TestFactory:
    def test_missing_key(self, monkeypatch):
        monkeypatch.setattr(settings, "CLAUDE_API_KEY", "")
        with pytest.raises(ConfigurationError) as exc_info:
            create_completion_provider("Claude")
        assert exc_info.value.variable == "CLAUDE_API_KEY"

    def test_get_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-openai")
        monkeypatch.setattr(settings, "CLAUDE_API_KEY", "sk-claude")
        assert settings.get_api_key("OpenAI") == "sk-openai"
        assert settings.get_api_key("Claude") == "sk-claude"
        assert settings.get_api_key("Gemini") == ""

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            create_completion_provider("Gemini")

    @pytest.mark.parametrize("name, provider_cls", [("OpenAI", OpenAIProvider), ("Claude", ClaudeProvider)])
    def test_creates_provider(self, monkeypatch, name, provider_cls):
        monkeypatch.setattr(settings, settings.PROVIDER_KEY_ENV[name], "sk-test")
        with patch.object(model_client, "create_model_client", return_value=_mock_client()) as factory:
            provider = create_completion_provider(name)
        factory.assert_called_once_with(name, "sk-test")
        assert isinstance(provider, provider_cls)
        assert provider.name == name


# ---------------------------------------------------------------------------
# 实际请求参数（替换底层 SDK 的 create，检查发出的请求）
# ---------------------------------------------------------------------------


class TestWireRequest:
    @pytest.mark.asyncio
    async def test_claude_system_is_top_level(self):
        client = model_client.create_model_client("Claude", "sk-test")
        reply = Message.model_validate({
            "id": "msg_1",
            "type": "message",
            "role": "assistant",
            "model": settings.CLAUDE_MODEL,
            "content": [{"type": "text", "text": "export const A = 1;"}],
            "stop_reason": "end_turn",
            "stop_sequence": None,
            "usage": {"input_tokens": 3, "output_tokens": 5},
        })

        with patch.object(client._client.messages, "create", new=AsyncMock(return_value=reply)) as create:
            text = await ClaudeProvider(client).complete("SYS", ["a", "b"])

        kwargs = create.await_args.kwargs
        assert text == "export const A = 1;"
        assert kwargs["system"] == "SYS"
        assert [message["role"] for message in kwargs["messages"]] == ["user"]
        assert kwargs["model"] == settings.CLAUDE_MODEL
        assert kwargs["temperature"] == settings.CLAUDE_TEMPERATURE
        assert kwargs["max_tokens"] == settings.CLAUDE_MAX_TOKENS

    @pytest.mark.asyncio
    async def test_openai_system_is_inline(self):
        client = model_client.create_model_client("OpenAI", "sk-test")
        reply = ChatCompletion.model_validate({
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "created": 0,
            "model": settings.OPENAI_MODEL,
            "choices": [{
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": "export const A = 1;"},
                "logprobs": None,
            }],
            "usage": {"prompt_tokens": 3, "completion_tokens": 5, "total_tokens": 8},
        })

        with patch.object(client._client.chat.completions, "create", new=AsyncMock(return_value=reply)) as create:
            text = await OpenAIProvider(client).complete("SYS", ["a", "b"])

        kwargs = create.await_args.kwargs
        assert text == "export const A = 1;"
        assert "system" not in kwargs
        assert [message["role"] for message in kwargs["messages"]] == ["system", "user", "user"]
        assert kwargs["messages"][0]["content"] == "SYS"
        assert kwargs["model"] == settings.OPENAI_MODEL
        assert kwargs["temperature"] == settings.OPENAI_TEMPERATURE
        assert kwargs["max_tokens"] == settings.OPENAI_MAX_TOKENS
