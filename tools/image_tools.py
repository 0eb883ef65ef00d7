"""
设计稿图片提取

1. 在节点树中查找疑似图片的节点：
   - 任一填充为 IMAGE 类型
   - RECTANGLE / ELLIPSE / INSTANCE / COMPONENT 且名称包含关键词（image、icon、logo ...）
2. 一次性批量获取所有候选节点的渲染图 URL
3. 逐张流式下载到 <组件目录>/assets/，单张失败只记录警告并跳过

整体失败（如批量获取 URL 失败）同样降级为空结果，不中断主流程。
"""
import logging
import os
import time
from typing import Iterable, List, Optional, Set

from config import settings
from messages.design_messages import DesignNode, ImageImport
from tools.figma_client import FigmaClient
from utils.input_parser import sanitize_component_name

logger = logging.getLogger(__name__)


# ============================================================
# 候选节点查找
# ============================================================


def is_image_candidate(node: DesignNode, keywords: Iterable[str] = settings.IMAGE_NAME_KEYWORDS) -> bool:
    """判断节点是否可能是一张图片。"""
    if node.fills and any(fill.type == "IMAGE" for fill in node.fills):
        return True
    if node.type in settings.IMAGE_NODE_TYPES:
        name = (node.name or "").lower()
        return any(keyword in name for keyword in keywords)
    return False


def find_image_nodes(
    node: DesignNode,
    keywords: Iterable[str] = settings.IMAGE_NAME_KEYWORDS,
    image_nodes: Optional[List[DesignNode]] = None,
) -> List[DesignNode]:
    """按树序收集所有图片候选节点。"""
    if image_nodes is None:
        image_nodes = []
    keywords = tuple(keywords)

    if is_image_candidate(node, keywords):
        image_nodes.append(node)
    for child in node.iter_children():
        find_image_nodes(child, keywords, image_nodes)
    return image_nodes


# ============================================================
# 下载
# ============================================================


def _unique_image_name(node: DesignNode, used: Set[str]) -> str:
    """由节点名生成可作为标识符的文件名，名称为空时使用时间戳；与已保存的图片重名时追加序号。"""
    base = sanitize_component_name(node.name or "")
    if not base:
        base = sanitize_component_name(f"image_{int(time.time() * 1000)}")
    name = base
    suffix = 2
    while name.lower() in used:
        name = f"{base}{suffix}"
        suffix += 1
    return name


async def extract_and_save_images(
    client: FigmaClient,
    file_key: str,
    root: DesignNode,
    target_path: str,
    keywords: Iterable[str] = settings.IMAGE_NAME_KEYWORDS,
) -> List[ImageImport]:
    """提取并保存设计稿中的图片，返回成功下载的图片引用列表。

    Args:
        client: Figma API 客户端
        file_key: Figma 文件 ID
        root: 要扫描的子树（通常是主画框）
        target_path: 组件目录，图片保存在其下的 assets/ 中
        keywords: 名称启发式使用的关键词

    Returns:
        ImageImport 列表；没有候选节点时直接返回空列表，不发起任何请求
    """
    image_nodes = find_image_nodes(root, keywords)
    if not image_nodes:
        return []

    print(f"🖼️  正在处理 {len(image_nodes)} 张图片...")

    try:
        nodes_by_id = {node.id: node for node in image_nodes}
        image_urls = await client.get_image_urls(file_key, list(nodes_by_id))

        assets_dir = os.path.join(target_path, settings.ASSETS_DIR_NAME)
        os.makedirs(assets_dir, exist_ok=True)

        image_imports: List[ImageImport] = []
        used_names: Set[str] = set()

        # 逐张下载，避免同时缓冲多个响应
        for node_id, image_url in image_urls.items():
            if not image_url:
                continue
            node = nodes_by_id.get(node_id)
            if node is None:
                continue

            try:
                image_name = _unique_image_name(node, used_names)
                file_name = f"{image_name}.{settings.IMAGE_FORMAT}"
                file_path = os.path.join(assets_dir, file_name)

                await client.download_image(image_url, file_path)
                used_names.add(image_name.lower())

                image_imports.append(ImageImport(
                    import_name=image_name,
                    file_name=file_name,
                    relative_path=f"./{settings.ASSETS_DIR_NAME}/{file_name}",
                    node_id=node_id,
                    node_name=node.name or "Unnamed",
                ))
                print(f"  ✓ 已保存: {file_name}")
            except Exception as e:
                logger.warning("图片下载失败 node=%s: %s", node_id, e)
                print(f"  ⚠️  节点 {node_id} 的图片下载失败: {e}")
                continue

        print(f"📸 成功保存 {len(image_imports)} 张图片")
        return image_imports

    except Exception as e:
        logger.warning("图片提取失败: %s", e)
        print(f"⚠️  图片提取失败: {e}")
        return []
