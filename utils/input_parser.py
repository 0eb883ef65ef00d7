"""
命令行参数解析与输入校验

命令行参数都是可选的：传入的参数直接作为对应问题的答案，
未传入的在运行时交互式询问。

  python main.py
  python main.py --provider Claude --file-id <key 或 Figma 链接> --name Card --framework Tailwind
"""
import argparse
import os
import re
from dataclasses import dataclass, field
from typing import List, Optional

from config import settings

_COMPONENT_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")


@dataclass
class CliOptions:
    """解析后的命令行参数（None 表示运行时询问）"""

    provider: Optional[str] = None
    file_id: Optional[str] = None
    output: Optional[str] = None
    frameworks: List[str] = field(default_factory=list)
    name: Optional[str] = None
    with_tests: Optional[bool] = None
    with_styles: Optional[bool] = None
    assume_yes: bool = False
    skip_deps: bool = False
    verbose: bool = False


# ============================================================
# 名称 / 路径工具
# ============================================================


def extract_file_key(value: str) -> str:
    """从 Figma URL 中提取 file_key；不是 URL 时原样返回（去除首尾空白）。"""
    value = value.strip()
    # 支持 /design/ 和 /file/ 两种路径格式
    match = re.search(r"figma\.com/(?:design|file)/([a-zA-Z0-9]+)", value)
    return match.group(1) if match else value


def sanitize_component_name(name: str) -> str:
    """去掉非字母数字字符；首字符不是字母时替换为 'Component'。"""
    cleaned = re.sub(r"[^a-zA-Z0-9]", "", name)
    return re.sub(r"^[^a-zA-Z]", "Component", cleaned)


def validate_component_name(name: str) -> Optional[str]:
    """校验组件名，合法返回 None，否则返回错误提示。"""
    name = name.strip()
    if not name:
        return "组件名不能为空"
    if not _COMPONENT_NAME_RE.match(name):
        return "组件名必须以字母开头，且只能包含字母和数字"
    return None


def validate_path(path: str) -> str:
    """规范化为绝对路径（不限制在当前目录内）。"""
    return os.path.abspath(os.path.normpath(os.path.expanduser(path)))


# ============================================================
# argparse
# ============================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="figma-to-react",
        description="Figma 设计稿 → React 组件生成器",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "示例:\n"
            "  python main.py\n"
            "  python main.py --provider OpenAI --file-id abc123 --name Card --framework Tailwind\n"
            "  python main.py --file-id https://www.figma.com/design/abc123/Demo --tests --styles -y\n"
        ),
    )
    parser.add_argument("--provider", choices=settings.PROVIDERS, help="模型提供方")
    parser.add_argument("--file-id", dest="file_id", help="Figma 文件 ID 或文件链接")
    parser.add_argument("--output", help=f"目标目录 (默认 {settings.DEFAULT_OUTPUT})")
    parser.add_argument(
        "--framework",
        dest="frameworks",
        action="append",
        choices=settings.FRAMEWORKS,
        default=[],
        help="样式框架，可重复指定",
    )
    parser.add_argument("--name", help="组件名（字母开头，仅字母和数字）")
    parser.add_argument(
        "--tests", dest="with_tests", action=argparse.BooleanOptionalAction, default=None,
        help="是否生成测试文件",
    )
    parser.add_argument(
        "--styles", dest="with_styles", action=argparse.BooleanOptionalAction, default=None,
        help="是否根据设计稿样式生成 CSS 文件",
    )
    parser.add_argument("-y", "--yes", dest="assume_yes", action="store_true", help="覆盖与安装依赖时不再确认")
    parser.add_argument("--skip-deps", dest="skip_deps", action="store_true", help="跳过依赖检查")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    return parser


def parse_args(args: Optional[List[str]] = None) -> CliOptions:
    """解析命令行参数，返回 CliOptions 实例。

    Raises:
        ValueError: --name 不合法时抛出
    """
    ns = build_parser().parse_args(args)

    if ns.name is not None:
        error = validate_component_name(ns.name)
        if error:
            raise ValueError(error)

    return CliOptions(
        provider=ns.provider,
        file_id=ns.file_id,
        output=ns.output,
        frameworks=list(dict.fromkeys(ns.frameworks)),
        name=ns.name.strip() if ns.name else None,
        with_tests=ns.with_tests,
        with_styles=ns.with_styles,
        assume_yes=ns.assume_yes,
        skip_deps=ns.skip_deps,
        verbose=ns.verbose,
    )
