"""
设计稿与生成任务相关数据类 — 与工作流解耦，独立存放

DesignNode 系列使用 pydantic 解析 Figma API 返回的 JSON（camelCase 字段，
未知字段忽略）；解析后的节点树只读。其余运行期数据使用 dataclass。
"""
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _FigmaModel(BaseModel):
    """Figma JSON 模型基类：接受 camelCase 键，忽略未声明字段，实例不可变。"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# ============================================================
# 节点属性
# ============================================================


class Color(_FigmaModel):
    """0‑1 归一化的 RGBA 颜色"""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


class Paint(_FigmaModel):
    """单个填充（SOLID / IMAGE / GRADIENT_* ...）"""

    type: str = ""
    color: Optional[Color] = None
    opacity: Optional[float] = None
    image_ref: Optional[str] = None


class TypeStyle(_FigmaModel):
    """文本样式"""

    font_family: Optional[str] = None
    font_size: Optional[float] = None
    font_weight: Optional[float] = None
    line_height_px: Optional[float] = None
    letter_spacing: Optional[float] = None
    text_align_horizontal: Optional[str] = None


class BoundingBox(_FigmaModel):
    """设计坐标系下的绝对包围盒"""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


# ============================================================
# 节点树
# ============================================================


class DesignNode(_FigmaModel):
    """Figma 文档树中的一个节点（frame / shape / text / instance ...）"""

    id: str = ""
    name: Optional[str] = None
    type: Optional[str] = None
    children: Optional[List["DesignNode"]] = None
    style: Optional[TypeStyle] = None
    fills: Optional[List[Paint]] = None
    absolute_bounding_box: Optional[BoundingBox] = None
    constraints: Optional[Dict[str, Any]] = None
    corner_radius: Optional[float] = None
    layout_mode: Optional[str] = None
    item_spacing: Optional[float] = None
    padding_left: Optional[float] = None
    padding_right: Optional[float] = None
    padding_top: Optional[float] = None
    padding_bottom: Optional[float] = None
    primary_axis_align_items: Optional[str] = None
    counter_axis_align_items: Optional[str] = None
    characters: Optional[str] = None

    def iter_children(self) -> List["DesignNode"]:
        return self.children or []

    def count(self) -> int:
        """节点总数（含自身）。"""
        return 1 + sum(child.count() for child in self.iter_children())


DesignNode.model_rebuild()


# ============================================================
# 生成任务
# ============================================================


@dataclass(frozen=True)
class ImageImport:
    """已下载到 assets/ 的图片引用"""

    import_name: str       # 可作为标识符的导入名
    file_name: str         # 保存的文件名
    relative_path: str     # 相对组件目录的导入路径（./assets/xxx.png）
    node_id: str           # 来源节点 ID
    node_name: str         # 来源节点显示名


@dataclass
class GenerationRequest:
    """单次运行的生成配置"""

    component_name: str                # 用户输入的原始名称
    sanitized_name: str                # 清洗后的标识符形式
    provider: str                      # OpenAI / Claude
    frameworks: List[str]              # 选中的样式框架（至少一个）
    output_dir: str                    # 目标根目录
    image_imports: List[ImageImport] = field(default_factory=list)
    with_tests: bool = False
    with_styles: bool = False

    @property
    def styling(self) -> str:
        return " and ".join(self.frameworks)

    @property
    def component_dir(self) -> str:
        return os.path.join(self.output_dir, self.sanitized_name)


@dataclass(frozen=True)
class GeneratedArtifact:
    """待写入磁盘的生成结果"""

    path: str
    content: str
