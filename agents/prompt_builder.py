"""
任务提示词构建

每个生成文件对应一个 build_xxx_task()，返回发送给模型的 user 消息文本。
全部是纯字符串拼接：相同输入必然得到相同输出。
"""
from typing import List, Sequence

from messages.design_messages import ImageImport

_RAW_CODE_ONLY = "【重要】只输出原始 TypeScript 代码：不要 markdown 围栏，不要注释说明，不要任何解释。"


# ============================================================
# 组件主体描述
# ============================================================


def build_prompt(component_name: str, structure: str, framework: str) -> str:
    """根据组件名、样式框架和设计稿结构生成组件描述。"""
    return f"""创建一个像素级还原设计稿的 React 组件，组件名为 {component_name}。
- 所有样式 **只能** 使用 {framework} 实现：不使用 CSS Modules，不引用外部样式表
- 尺寸、颜色、字体、间距与 Figma 设计稿保持一致
- 合理使用 {framework} 的响应式能力
- 为 props 和事件提供严格的 TypeScript 类型
- 组件结构现代、可访问，遵循 React 最佳实践
- 达到可上线标准，包含必要的错误处理

CRITICAL: 所有视觉样式都必须通过 {framework} 的组件 / 工具类完成。

以下是带有视觉属性的组件结构：

{structure}

请使用 {framework} 创建与该设计完全一致的组件。"""


def build_image_context(image_imports: Sequence[ImageImport]) -> str:
    """列出 assets/ 中可用的图片及其导入语句；没有图片时返回空字符串。"""
    if not image_imports:
        return ""
    lines = [
        f"// {image.node_name} -> import {image.import_name} from '{image.relative_path}';"
        for image in image_imports
    ]
    return (
        "\n\nassets 目录中可用的图片：\n"
        + "\n".join(lines)
        + "\n\n请在组件 JSX 中合理使用这些图片。"
    )


# ============================================================
# 各文件的任务消息
# ============================================================


def build_types_task(component_name: str) -> str:
    return f"""为组件 {component_name} 创建 TypeScript 类型定义。

{_RAW_CODE_ONLY}
文件路径: components/{component_name}/types/types.ts
按照系统指令中的约定，包含 props 接口、hook 参数 / 返回值接口以及事件处理函数类型。"""


def build_hook_task(component_name: str) -> str:
    return f"""创建只包含业务逻辑的自定义 hook use{component_name}。

{_RAW_CODE_ONLY}
文件路径: components/{component_name}/hooks/use{component_name}.ts
从 '../types/types' 导入类型。
遵循系统指令中的自定义 Hook 原则：类型安全、错误处理、纯逻辑、JSDoc 文档。"""


def build_component_task(
    component_prompt: str,
    component_name: str,
    framework: str,
    image_imports: Sequence[ImageImport] = (),
) -> str:
    parts: List[str] = [
        f"{component_prompt}{build_image_context(image_imports)}",
        "",
        "【重要】只输出原始 TypeScript/React 代码：不要 markdown 围栏，不要注释说明，不要任何解释。",
        f"文件路径: components/{component_name}/{component_name}.tsx",
        f"从 './types/types' 导入类型，从 './hooks/use{component_name}' 导入 hook。",
        f"组件名: {component_name}",
        f"样式 **只能** 使用 {framework}，不使用 CSS Modules 或外部样式表。",
    ]
    if image_imports:
        parts.append("在组件 JSX 中合适的位置导入并使用上述图片。")
    return "\n".join(parts)


def build_test_task(component_name: str, framework: str) -> str:
    return f"""为组件 {component_name}（样式框架: {framework}）编写单元测试。

{_RAW_CODE_ONLY}
文件路径: components/{component_name}/__tests__/{component_name}.test.tsx
使用 Jest 和 @testing-library/react：
- 从 '../{component_name}' 默认导入组件，从 '../types/types' 导入类型
- 覆盖默认渲染、props 变化、用户交互（点击 / 输入）以及可访问性角色查询
- 需要时 mock '../hooks/use{component_name}'"""
