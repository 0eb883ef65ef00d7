"""
错误类型 — 所有致命错误都继承 FigmaToReactError，由 main.py 统一转换为退出码 1
"""
from typing import Optional


class FigmaToReactError(Exception):
    """本工具所有可预期错误的基类。"""


class ConfigurationError(FigmaToReactError):
    """缺少必要的凭证 / 配置。"""

    def __init__(self, variable: str, hint: str = "") -> None:
        self.variable = variable
        message = f"缺少 {variable}，请在环境变量或 .env 文件中配置"
        if hint:
            message = f"{message}（{hint}）"
        super().__init__(message)


class FigmaFetchError(FigmaToReactError):
    """Figma API 请求失败。

    kind 取值：
      - access_denied: 403，凭证无效或权限不足
      - not_found:     404，文件不存在
      - other:         其他状态码、超时、连接错误
    """

    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    OTHER = "other"

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class InvalidDesignError(FigmaToReactError):
    """Figma 文件结构不符合预期（缺少 document.children[0] 等）。"""


class GenerationError(FigmaToReactError):
    """模型调用失败或返回了非文本内容。"""

    def __init__(self, provider: str, cause: object) -> None:
        self.provider = provider
        self.cause = cause
        super().__init__(f"{provider} 生成失败: {cause}")


class FileWriteError(FigmaToReactError):
    """写入输出文件失败。"""

    def __init__(self, path: str, cause: Optional[BaseException]) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"写入文件失败 {path}: {cause}")
