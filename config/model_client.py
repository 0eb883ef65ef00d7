"""
模型客户端工厂 — 两个可互换的模型提供方（OpenAI / Claude）

调用方只传入统一的 (系统指令, 任务消息列表)，由各提供方自行完成：
  - 消息整形：OpenAI 把系统指令作为消息序列中的 system 角色；
    Claude 要求系统指令作为顶层 system 字段，消息序列中只能有 user/assistant
  - 固定的模型名与解码参数
  - 从各自不同的响应结构中取出纯文本（choices[0].message.content / content[0].text
    由 autogen 客户端统一为 CreateResult.content）

不做重试，也不在提供方之间回退：调用失败直接抛出 GenerationError。
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from autogen_core.models import ChatCompletionClient, CreateResult, LLMMessage, SystemMessage, UserMessage
from autogen_ext.models.anthropic import AnthropicChatCompletionClient
from autogen_ext.models.openai import OpenAIChatCompletionClient

from config import settings
from utils.errors import ConfigurationError, GenerationError


# ============================================================
# 统一接口
# ============================================================


class CompletionProvider(ABC):
    """一次性的 (系统指令, 任务消息) → 文本 调用。"""

    name: str = ""

    def __init__(self, client: ChatCompletionClient) -> None:
        self._client = client

    @abstractmethod
    def build_messages(self, system_instruction: str, task_messages: Sequence[str]) -> List[LLMMessage]:
        """把统一表示整形为该提供方要求的消息序列。"""

    async def complete(self, system_instruction: str, task_messages: Sequence[str]) -> str:
        """调用模型并返回纯文本回复。

        Raises:
            GenerationError: 请求失败或回复不是文本
        """
        if not task_messages:
            raise GenerationError(self.name, "至少需要一条任务消息")

        messages = self.build_messages(system_instruction, task_messages)
        try:
            result = await self._client.create(messages)
        except Exception as e:
            raise GenerationError(self.name, f"{type(e).__name__}: {e}") from e
        return self.extract_text(result)

    def extract_text(self, result: CreateResult) -> str:
        content = result.content
        if isinstance(content, str):
            return content
        raise GenerationError(self.name, f"模型返回了非文本内容: {type(content).__name__}")

    async def close(self) -> None:
        await self._client.close()


# ============================================================
# OpenAI
# ============================================================


class OpenAIProvider(CompletionProvider):
    """系统指令以内联 system 消息发送，任务消息逐条作为 user 消息。"""

    name = "OpenAI"

    def build_messages(self, system_instruction: str, task_messages: Sequence[str]) -> List[LLMMessage]:
        messages: List[LLMMessage] = [SystemMessage(content=system_instruction)]
        messages.extend(UserMessage(content=task, source="user") for task in task_messages)
        return messages


# ============================================================
# Claude
# ============================================================


class ClaudeProvider(CompletionProvider):
    """系统指令单独放在最前面（Anthropic 客户端会将其提升为顶层 system 字段），
    多条任务消息合并为一个 user 轮次，保证消息序列中只有 user 角色。
    """

    name = "Claude"

    def build_messages(self, system_instruction: str, task_messages: Sequence[str]) -> List[LLMMessage]:
        task = "\n\n".join(task_messages)
        return [
            SystemMessage(content=system_instruction),
            UserMessage(content=task, source="user"),
        ]


# ============================================================
# 工厂函数
# ============================================================


def create_model_client(provider: str, api_key: str) -> ChatCompletionClient:
    """按提供方创建底层 ChatCompletionClient（模型名与解码参数固定）。"""
    if provider == "OpenAI":
        return OpenAIChatCompletionClient(
            model=settings.OPENAI_MODEL,
            api_key=api_key,
            temperature=settings.OPENAI_TEMPERATURE,
            max_tokens=settings.OPENAI_MAX_TOKENS,
        )
    if provider == "Claude":
        return AnthropicChatCompletionClient(
            model=settings.CLAUDE_MODEL,
            api_key=api_key,
            temperature=settings.CLAUDE_TEMPERATURE,
            max_tokens=settings.CLAUDE_MAX_TOKENS,
        )
    raise ValueError(f"未知的模型提供方: {provider}")


_PROVIDER_CLASSES = {
    "OpenAI": OpenAIProvider,
    "Claude": ClaudeProvider,
}


def create_completion_provider(provider: str) -> CompletionProvider:
    """根据提供方名称创建 CompletionProvider。

    Raises:
        ConfigurationError: 对应的 API Key 未配置
        ValueError: 未知的提供方
    """
    if provider not in _PROVIDER_CLASSES:
        raise ValueError(f"未知的模型提供方: {provider}")

    api_key = settings.get_api_key(provider)
    if not api_key:
        raise ConfigurationError(settings.PROVIDER_KEY_ENV[provider], f"{provider} API Key")

    client = create_model_client(provider, api_key)
    model = settings.OPENAI_MODEL if provider == "OpenAI" else settings.CLAUDE_MODEL
    print(f"[模型] {provider} → {model}")
    return _PROVIDER_CLASSES[provider](client)
