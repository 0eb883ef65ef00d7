"""
主工作流编排器 — 严格顺序执行，每一步等待外部系统完成后再进入下一步

  Stage 1: 选择模型、获取 Figma 文件并生成结构摘要
  Stage 2: 收集目标目录 / 样式框架 / 组件名 / 可选产物
  Stage 3: 提取设计稿图片到 assets/
  Stage 4: 检查样式框架依赖
  Stage 5: 逐个生成并写入 types → hook → 组件 →（测试）→（样式表）

每个文件生成后立即写盘；中途失败时已写入的文件保留在磁盘上。
"""
import os
from typing import Callable, List, Optional

from agents.prompt_builder import (
    build_component_task,
    build_hook_task,
    build_prompt,
    build_test_task,
    build_types_task,
)
from agents.system_prompt import SYSTEM_PROMPT
from config import settings
from config.model_client import CompletionProvider, create_completion_provider
from messages.design_messages import DesignNode, GeneratedArtifact, GenerationRequest
from messages.workflow_messages import WorkflowPhase, WorkflowState
from tools.dependency_tools import find_missing_dependencies, install_dependencies, load_package_json
from tools.figma_client import FigmaClient
from tools.file_tools import ensure_directory, write_file
from tools.image_tools import extract_and_save_images
from utils.input_parser import (
    CliOptions,
    extract_file_key,
    sanitize_component_name,
    validate_component_name,
    validate_path,
)
from utils.interactive import InputFunc, ask_choice, ask_confirm, ask_multi_choice, ask_text
from utils.tree_summary import extract_css, summarize_tree_with_styles

ProviderFactory = Callable[[str], CompletionProvider]
FigmaClientFactory = Callable[[str], FigmaClient]


def log(source: str, content: str) -> None:
    print(f"[{source}] {content}")


def _require_text(value: str) -> Optional[str]:
    return None if value.strip() else "不能为空"


# ============================================================
# 产物生成
# ============================================================


def plan_artifacts(request: GenerationRequest, structure: str) -> List[tuple[str, str, str]]:
    """返回需要模型生成的文件列表：(显示名, 文件路径, 任务消息)，按生成顺序排列。"""
    name = request.sanitized_name
    base = request.component_dir
    component_prompt = build_prompt(name, structure, request.styling)

    plan = [
        ("类型定义", os.path.join(base, "types", "types.ts"), build_types_task(name)),
        ("自定义 Hook", os.path.join(base, "hooks", f"use{name}.ts"), build_hook_task(name)),
        (
            "组件",
            os.path.join(base, f"{name}.tsx"),
            build_component_task(component_prompt, name, request.styling, request.image_imports),
        ),
    ]
    if request.with_tests:
        plan.append((
            "测试",
            os.path.join(base, "__tests__", f"{name}.test.tsx"),
            build_test_task(name, request.styling),
        ))
    return plan


async def generate_artifacts(
    provider: CompletionProvider,
    request: GenerationRequest,
    structure: str,
    root: DesignNode,
    state: WorkflowState,
) -> List[GeneratedArtifact]:
    """逐个调用模型生成文件并立即写盘；样式表直接由设计稿样式生成，不调用模型。"""
    artifacts: List[GeneratedArtifact] = []

    for label, path, task in plan_artifacts(request, structure):
        log("system", f"🤖 正在生成{label}: {os.path.basename(path)}")
        raw = await provider.complete(SYSTEM_PROMPT, [task])
        content = write_file(path, raw)
        artifacts.append(GeneratedArtifact(path=path, content=content))
        state.written_files.append(path)

    if request.with_styles:
        path = os.path.join(request.component_dir, "styles", f"{request.sanitized_name}.css")
        log("system", f"🎨 正在生成样式表: {os.path.basename(path)}")
        content = write_file(path, extract_css(root), clean=False)
        artifacts.append(GeneratedArtifact(path=path, content=content))
        state.written_files.append(path)

    return artifacts


# ============================================================
# 依赖检查
# ============================================================


async def check_dependencies(frameworks: List[str], assume_yes: bool, input_func: InputFunc) -> None:
    """检查所选框架的 npm 依赖，缺失时询问是否安装；任何失败都不中断工作流。"""
    package = load_package_json(settings.PACKAGE_JSON_PATH)
    if package is None:
        return

    missing = find_missing_dependencies(frameworks, package)
    if missing.empty:
        log("system", "✅ 所需依赖均已安装")
        return

    print("\n📦 缺少以下依赖:")
    if missing.dependencies:
        print(f"  ➤ dependencies: {', '.join(missing.dependencies)}")
    if missing.dev_dependencies:
        print(f"  ➤ devDependencies: {', '.join(missing.dev_dependencies)}")

    if not assume_yes and not ask_confirm("是否安装缺失的依赖?", default=True, input_func=input_func):
        log("system", "⚠️ 已跳过依赖安装")
        return

    await install_dependencies(missing, settings.PACKAGE_JSON_PATH)


# ============================================================
# 核心工作流
# ============================================================


async def run_workflow(
    options: CliOptions,
    input_func: InputFunc = input,
    provider_factory: ProviderFactory = create_completion_provider,
    figma_client_factory: FigmaClientFactory = FigmaClient,
) -> WorkflowState:
    """运行一次完整的生成流程，返回最终状态。

    Raises:
        FigmaToReactError 的各个子类：配置、Figma 请求、文档结构、生成、写盘错误
    """
    state = WorkflowState()

    # ------------------------------------------------------------------
    # Stage 1: 模型 + 设计稿
    # ------------------------------------------------------------------
    provider_name = options.provider or ask_choice("选择 AI 模型:", settings.PROVIDERS, input_func=input_func)
    provider = provider_factory(provider_name)

    try:
        file_key = extract_file_key(
            options.file_id
            or ask_text("请输入 Figma 文件 ID", validate=_require_text, input_func=input_func)
        )

        async with figma_client_factory(settings.FIGMA_API_KEY) as figma:
            state.phase = WorkflowPhase.FETCH_DESIGN
            log("system", "📡 正在获取 Figma 文件...")
            main_frame = await figma.get_main_frame(file_key)
            structure = summarize_tree_with_styles(main_frame)
            log("system", f"已解析主画框 \"{main_frame.name or 'Unnamed'}\"（共 {main_frame.count()} 个节点）")

            # ----------------------------------------------------------
            # Stage 2: 生成选项
            # ----------------------------------------------------------
            state.phase = WorkflowPhase.COLLECT_OPTIONS
            target_folder = validate_path(
                options.output
                or ask_text("目标目录", default=settings.DEFAULT_OUTPUT, input_func=input_func)
            )
            ensure_directory(target_folder)

            frameworks = options.frameworks or ask_multi_choice(
                "选择样式框架:", settings.FRAMEWORKS, input_func=input_func
            )
            component_name = options.name or ask_text(
                "请输入组件名", validate=validate_component_name, input_func=input_func
            )
            with_tests = options.with_tests
            if with_tests is None:
                with_tests = ask_confirm("是否生成测试文件?", default=False, input_func=input_func)
            with_styles = options.with_styles
            if with_styles is None:
                with_styles = ask_confirm("是否根据设计稿样式生成 CSS 文件?", default=False, input_func=input_func)

            request = GenerationRequest(
                component_name=component_name,
                sanitized_name=sanitize_component_name(component_name.strip()),
                provider=provider_name,
                frameworks=list(frameworks),
                output_dir=target_folder,
                with_tests=with_tests,
                with_styles=with_styles,
            )
            state.component_dir = request.component_dir

            if os.path.exists(request.component_dir) and not options.assume_yes:
                overwrite = ask_confirm(
                    f"组件 '{request.sanitized_name}' 已存在，是否覆盖?",
                    default=False,
                    input_func=input_func,
                )
                if not overwrite:
                    state.phase = WorkflowPhase.CANCELLED
                    log("system", "操作已取消。")
                    return state

            # ----------------------------------------------------------
            # Stage 3: 图片
            # ----------------------------------------------------------
            state.phase = WorkflowPhase.EXTRACT_IMAGES
            log("system", "🖼️  正在提取设计稿图片...")
            request.image_imports = await extract_and_save_images(
                figma, file_key, main_frame, request.component_dir
            )
            state.image_count = len(request.image_imports)
            if not request.image_imports:
                log("system", "ℹ️  设计稿中没有找到可提取的图片")

        # --------------------------------------------------------------
        # Stage 4: 依赖
        # --------------------------------------------------------------
        if not options.skip_deps:
            state.phase = WorkflowPhase.CHECK_DEPENDENCIES
            log("system", "📦 正在检查依赖...")
            await check_dependencies(request.frameworks, options.assume_yes, input_func)

        # --------------------------------------------------------------
        # Stage 5: 生成
        # --------------------------------------------------------------
        state.phase = WorkflowPhase.GENERATE
        log("system", f"🤖 正在使用 {provider_name} 生成 React 组件...")
        await generate_artifacts(provider, request, structure, main_frame, state)

    finally:
        await provider.close()

    state.phase = WorkflowPhase.COMPLETED
    print()
    print("✨ 组件生成成功！")
    print(f"📁 位置: {request.component_dir}")
    print(f"🎯 组件名: {request.sanitized_name}")
    print(f"💄 样式: {request.styling}")
    if request.image_imports:
        print(f"🖼️  图片: {len(request.image_imports)} 张，保存在 assets/")
    return state
