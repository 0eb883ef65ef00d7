"""
节点树摘要与样式提取

  - summarize_tree:             缩进大纲，每个节点一行 "- 名称 (类型)"
  - extract_styles_for_ai:      单个节点的样式注释行（// Font: ...），供模型参考
  - summarize_tree_with_styles: 大纲 + 样式注释交错，作为 prompt 中的结构描述
  - extract_css:                按节点生成 CSS 规则块，写入样式表

所有函数均为纯函数；节点缺少的字段直接省略，不补默认值。
"""
import json
import re
from typing import List, Optional

from messages.design_messages import DesignNode, Paint

INDENT = "  "

# Figma 枚举 → CSS 取值
_JUSTIFY_CONTENT = {
    "MIN": "flex-start",
    "CENTER": "center",
    "MAX": "flex-end",
    "SPACE_BETWEEN": "space-between",
}
_ALIGN_ITEMS = {
    "MIN": "flex-start",
    "CENTER": "center",
    "MAX": "flex-end",
    "BASELINE": "baseline",
}
_TEXT_ALIGN = {
    "LEFT": "left",
    "CENTER": "center",
    "RIGHT": "right",
    "JUSTIFIED": "justify",
}
_FLEX_DIRECTION = {
    "HORIZONTAL": "row",
    "VERTICAL": "column",
}


# ============================================================
# 格式化工具
# ============================================================


def _num(value: float) -> str:
    """数字格式化：整数值去掉 .0 尾巴。"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _channel(value: float) -> int:
    # 四舍五入（round() 是银行家舍入，x.5 会向偶数取整）
    return int(value * 255 + 0.5)


def _solid_fill(node: DesignNode) -> Optional[Paint]:
    """取第一个填充，仅当它是带颜色的 SOLID 填充时返回。"""
    if not node.fills:
        return None
    fill = node.fills[0]
    if fill.type == "SOLID" and fill.color is not None:
        return fill
    return None


def to_rgba(fill: Paint) -> str:
    """0‑1 浮点颜色 → rgba(0‑255 整数, 透明度)。"""
    color = fill.color
    opacity = 1 if fill.opacity is None else fill.opacity
    return f"rgba({_channel(color.r)}, {_channel(color.g)}, {_channel(color.b)}, {_num(opacity)})"


def _padding(node: DesignNode) -> Optional[str]:
    sides = (node.padding_top, node.padding_right, node.padding_bottom, node.padding_left)
    if all(side is None for side in sides):
        return None
    return " ".join(f"{_num(side or 0)}px" for side in sides)


def _comment_text(text: str) -> str:
    # CSS 注释内不能出现结束标记
    return text.replace("*/", "* /")


def to_class_name(name: Optional[str]) -> str:
    """节点显示名 → CSS 类名：小写，连续的非字母数字字符替换为单个 '-'。"""
    class_name = re.sub(r"[^a-z0-9]+", "-", (name or "").lower()).strip("-")
    return class_name or "node"


# ============================================================
# 树状大纲
# ============================================================


def summarize_tree(node: DesignNode, level: int = 0) -> str:
    """输出节点树的缩进大纲，每个节点一行，每层缩进两个空格。"""
    summary = f"{INDENT * level}- {node.name or 'Unnamed'} ({node.type or 'Unknown'})\n"
    for child in node.iter_children():
        summary += summarize_tree(child, level + 1)
    return summary


# ============================================================
# 样式注释（供模型参考）
# ============================================================


def extract_styles_for_ai(node: DesignNode, level: int = 0) -> str:
    """将单个节点的视觉属性输出为注释行。"""
    indent = INDENT * level
    lines: List[str] = []

    if node.characters:
        lines.append(f'// TEXT: "{node.characters}"')

    fill = _solid_fill(node)
    if fill is not None:
        lines.append(f"// Background: {to_rgba(fill)}")

    style = node.style
    if style is not None:
        if style.font_family:
            lines.append(f"// Font: {style.font_family}")
        if style.font_size is not None:
            lines.append(f"// Font Size: {_num(style.font_size)}px")
        if style.font_weight is not None:
            lines.append(f"// Font Weight: {_num(style.font_weight)}")
        if style.line_height_px is not None:
            lines.append(f"// Line Height: {_num(style.line_height_px)}px")
        if style.letter_spacing is not None:
            lines.append(f"// Letter Spacing: {_num(style.letter_spacing)}px")
        if style.text_align_horizontal:
            lines.append(f"// Text Align: {style.text_align_horizontal}")

    box = node.absolute_bounding_box
    if box is not None:
        lines.append(f"// Position: x={_num(box.x)}px, y={_num(box.y)}px")
        lines.append(f"// Dimensions: {_num(box.width)}px × {_num(box.height)}px")

    if node.constraints:
        lines.append(f"// Constraints: {json.dumps(node.constraints, separators=(',', ':'))}")

    padding = _padding(node)
    if padding is not None:
        lines.append(f"// Padding: {padding}")

    if node.corner_radius is not None:
        lines.append(f"// Border Radius: {_num(node.corner_radius)}px")

    if node.layout_mode:
        lines.append(f"// Layout Mode: {node.layout_mode}")
        if node.item_spacing is not None:
            lines.append(f"// Item Spacing: {_num(node.item_spacing)}px")
        if node.primary_axis_align_items:
            lines.append(f"// Main Axis: {node.primary_axis_align_items}")
        if node.counter_axis_align_items:
            lines.append(f"// Cross Axis: {node.counter_axis_align_items}")

    return "".join(f"{indent}{line}\n" for line in lines)


def summarize_tree_with_styles(node: DesignNode, level: int = 0) -> str:
    """大纲行 + 该节点的样式注释（缩进一层），再递归子节点。"""
    summary = f"{INDENT * level}- {node.name or 'Unnamed'} ({node.type or 'Unknown'})\n"
    summary += extract_styles_for_ai(node, level + 1)
    for child in node.iter_children():
        summary += summarize_tree_with_styles(child, level + 1)
    return summary


# ============================================================
# CSS 样式表
# ============================================================


def _css_declarations(node: DesignNode) -> List[str]:
    declarations: List[str] = []

    if node.characters:
        declarations.append(f'/* text: "{_comment_text(node.characters)}" */')

    fill = _solid_fill(node)
    if fill is not None:
        prop = "color" if node.type == "TEXT" else "background-color"
        declarations.append(f"{prop}: {to_rgba(fill)};")

    style = node.style
    if style is not None:
        if style.font_family:
            declarations.append(f"font-family: '{style.font_family}';")
        if style.font_size is not None:
            declarations.append(f"font-size: {_num(style.font_size)}px;")
        if style.font_weight is not None:
            declarations.append(f"font-weight: {_num(style.font_weight)};")
        if style.line_height_px is not None:
            declarations.append(f"line-height: {_num(style.line_height_px)}px;")
        if style.letter_spacing is not None:
            declarations.append(f"letter-spacing: {_num(style.letter_spacing)}px;")
        if style.text_align_horizontal:
            align = _TEXT_ALIGN.get(style.text_align_horizontal, style.text_align_horizontal.lower())
            declarations.append(f"text-align: {align};")

    box = node.absolute_bounding_box
    if box is not None:
        declarations.append(f"/* position: x={_num(box.x)}px, y={_num(box.y)}px */")
        declarations.append(f"width: {_num(box.width)}px;")
        declarations.append(f"height: {_num(box.height)}px;")

    if node.constraints:
        declarations.append(f"/* constraints: {_comment_text(json.dumps(node.constraints, separators=(',', ':')))} */")

    padding = _padding(node)
    if padding is not None:
        declarations.append(f"padding: {padding};")

    if node.corner_radius is not None:
        declarations.append(f"border-radius: {_num(node.corner_radius)}px;")

    if node.layout_mode and node.layout_mode in _FLEX_DIRECTION:
        declarations.append("display: flex;")
        declarations.append(f"flex-direction: {_FLEX_DIRECTION[node.layout_mode]};")
        if node.item_spacing is not None:
            declarations.append(f"gap: {_num(node.item_spacing)}px;")
        if node.primary_axis_align_items in _JUSTIFY_CONTENT:
            declarations.append(f"justify-content: {_JUSTIFY_CONTENT[node.primary_axis_align_items]};")
        if node.counter_axis_align_items in _ALIGN_ITEMS:
            declarations.append(f"align-items: {_ALIGN_ITEMS[node.counter_axis_align_items]};")

    return declarations


def extract_css(node: DesignNode, class_name: Optional[str] = None) -> str:
    """按树序输出 CSS 规则块；没有任何声明的节点不输出规则，但仍递归其子节点。

    子节点的类名只由子节点自己的显示名推导，不拼接父类名。
    """
    class_name = class_name or to_class_name(node.name)
    css = ""

    declarations = _css_declarations(node)
    if declarations:
        body = "".join(f"{INDENT}{decl}\n" for decl in declarations)
        css += f".{class_name} {{\n{body}}}\n\n"

    for child in node.iter_children():
        css += extract_css(child, to_class_name(child.name))
    return css
