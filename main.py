"""
Figma 设计稿 → React 组件生成器 — 命令行入口

  python main.py                      全交互模式
  python main.py --provider Claude --file-id <key> --name Card --framework MUI

退出码：成功或用户取消为 0，任何不可恢复的错误为 1。
"""
import asyncio
import logging
import os
import sys

# 将项目根目录添加到 Python 路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import settings
from utils.errors import ConfigurationError, FigmaToReactError

# ============================================================
# 日志配置
# ============================================================
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# 项目内的 logger 名称前缀（--verbose 时调到 DEBUG）
PROJECT_LOGGERS = ("config", "tools", "utils", "workflow", "agents", "messages")


# ============================================================
# CLI 模式
# ============================================================


async def run_cli(args: list[str]) -> int:
    """CLI 模式入口，返回进程退出码。"""
    from utils.input_parser import parse_args
    from workflow.orchestrator import run_workflow

    try:
        options = parse_args(args)
    except ValueError as e:
        print(f"[错误] {e}")
        return 1

    if options.verbose:
        for name in PROJECT_LOGGERS:
            logging.getLogger(name).setLevel(logging.DEBUG)

    print()
    print("=" * 60)
    print("  🚀 Figma → React 组件生成器")
    print("=" * 60)

    try:
        if not settings.FIGMA_API_KEY:
            raise ConfigurationError(
                "FIGMA_API_KEY",
                "获取方式: https://help.figma.com/hc/en-us/articles/8085703771159",
            )
        await run_workflow(options)
    except (KeyboardInterrupt, EOFError):
        print("\n\n[中断] 用户取消了操作。")
        return 0
    except FigmaToReactError as e:
        print(f"\n❌ 错误: {e}")
        return 1
    return 0


# ============================================================
# 主入口
# ============================================================


def main() -> None:
    try:
        exit_code = asyncio.run(run_cli(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\n\n[中断] 用户取消了操作。")
        exit_code = 0
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
