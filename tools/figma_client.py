"""
Figma REST API 客户端

  - get_file:        GET /v1/files/:key，返回完整文档 JSON
  - get_main_frame:  取 document.children[0] 并解析为 DesignNode
  - get_image_urls:  GET /v1/images/:key?ids=...，批量获取节点渲染图 URL
  - download_image:  流式下载单张图片到磁盘

认证使用 X-Figma-Token 请求头。所有请求只发起一次，不重试。

用法:
  async with FigmaClient(settings.FIGMA_API_KEY) as client:
      frame = await client.get_main_frame("abc123")
"""
import logging
import os
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from config import settings
from messages.design_messages import DesignNode
from utils.errors import FigmaFetchError, InvalidDesignError

logger = logging.getLogger(__name__)


class FigmaClient:
    """异步 Figma API 客户端。

    Args:
        token: Figma Personal Access Token
        timeout: 文件请求超时（秒），None 表示不限制
    """

    def __init__(
        self,
        token: str,
        base_url: str = settings.FIGMA_API_BASE,
        timeout: Optional[float] = settings.FIGMA_TIMEOUT,
    ) -> None:
        self._token = token
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    # ------------------------------------------------------------------
    # 连接管理
    # ------------------------------------------------------------------

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"X-Figma-Token": self._token},
                timeout=self._timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "FigmaClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # 请求封装
    # ------------------------------------------------------------------

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None, **kwargs: Any) -> Dict[str, Any]:
        """发起 GET 请求，按状态码区分错误类型。"""
        client = self._get_client()
        try:
            resp = await client.get(path, params=params, **kwargs)
        except httpx.TimeoutException as e:
            raise FigmaFetchError(FigmaFetchError.OTHER, f"Figma API 请求超时: {path}") from e
        except httpx.HTTPError as e:
            raise FigmaFetchError(FigmaFetchError.OTHER, f"Figma API 连接失败: {e}") from e

        if resp.status_code == 403:
            raise FigmaFetchError(
                FigmaFetchError.ACCESS_DENIED,
                "Figma API Key 无效或权限不足 (403)",
            )
        if resp.status_code == 404:
            raise FigmaFetchError(FigmaFetchError.NOT_FOUND, f"Figma 文件不存在 (404): {path}")
        if resp.status_code != 200:
            raise FigmaFetchError(
                FigmaFetchError.OTHER,
                f"Figma API 错误 {resp.status_code}: {resp.text[:200]}",
            )

        try:
            return resp.json()
        except ValueError as e:
            raise FigmaFetchError(FigmaFetchError.OTHER, f"Figma API 返回了无效的 JSON: {path}") from e

    # ------------------------------------------------------------------
    # 文件
    # ------------------------------------------------------------------

    async def get_file(self, file_key: str) -> Dict[str, Any]:
        """获取 Figma 文件完整文档。"""
        data = await self._get(f"/v1/files/{file_key}")
        logger.info("get_file: file=%s, name=%s", file_key, data.get("name", ""))
        return data

    async def get_main_frame(self, file_key: str) -> DesignNode:
        """获取文件并返回第一个顶层节点作为主画框。

        Raises:
            FigmaFetchError: 请求失败
            InvalidDesignError: 文档缺少 document.children[0] 或节点结构非法
        """
        data = await self.get_file(file_key)
        return parse_main_frame(data)

    # ------------------------------------------------------------------
    # 图片
    # ------------------------------------------------------------------

    async def get_image_urls(
        self,
        file_key: str,
        node_ids: List[str],
        fmt: str = settings.IMAGE_FORMAT,
        scale: int = settings.IMAGE_SCALE,
        timeout: Optional[float] = settings.IMAGE_LIST_TIMEOUT,
    ) -> Dict[str, Optional[str]]:
        """批量获取节点渲染图的临时下载 URL（node_id → url，渲染失败的为 None）。"""
        params = {
            "ids": ",".join(node_ids),
            "format": fmt,
            "scale": str(scale),
        }
        data = await self._get(f"/v1/images/{file_key}", params=params, timeout=timeout)

        if data.get("err"):
            raise FigmaFetchError(FigmaFetchError.OTHER, f"Figma 图片渲染失败: {data['err']}")

        images = data.get("images") or {}
        logger.info(
            "get_image_urls: file=%s, requested=%d, rendered=%d",
            file_key, len(node_ids), sum(1 for url in images.values() if url),
        )
        return images

    async def download_image(
        self,
        url: str,
        file_path: str,
        timeout: Optional[float] = settings.IMAGE_DOWNLOAD_TIMEOUT,
    ) -> int:
        """流式下载图片，先写入 file_path + ".part"，完整接收后再替换为 file_path，返回写入的字节数。

        下载中途失败时删除临时文件，不在目标目录留下残缺图片。
        URL 是 Figma 签发的临时地址，不需要认证头。
        """
        part_path = f"{file_path}.part"
        written = 0
        try:
            async with httpx.AsyncClient(timeout=timeout) as dl_client:
                async with dl_client.stream("GET", url) as resp:
                    resp.raise_for_status()
                    with open(part_path, "wb") as f:
                        async for chunk in resp.aiter_bytes():
                            f.write(chunk)
                            written += len(chunk)
            os.replace(part_path, file_path)
        except BaseException:
            if os.path.exists(part_path):
                os.remove(part_path)
            raise
        logger.debug("download_image: %s (%d bytes)", file_path, written)
        return written


def parse_main_frame(data: Dict[str, Any]) -> DesignNode:
    """从 /v1/files/:key 的响应中取出 document.children[0]。"""
    document = data.get("document") if isinstance(data, dict) else None
    children = document.get("children") if isinstance(document, dict) else None
    if not isinstance(children, list) or not children:
        raise InvalidDesignError("Figma 文件结构无效：缺少 document.children[0]")
    try:
        return DesignNode.model_validate(children[0])
    except ValidationError as e:
        raise InvalidDesignError(f"Figma 节点结构无效: {e.error_count()} 处字段错误") from e
