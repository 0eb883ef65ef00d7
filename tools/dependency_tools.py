"""
样式框架依赖检查

读取目标项目的 package.json，找出所选框架缺少的 npm 依赖；
安装交给 npm 完成（子进程），安装失败不影响组件生成。
"""
import asyncio
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

# 框架 → (dependencies, devDependencies)
FRAMEWORK_DEP_MAP: Dict[str, Dict[str, List[str]]] = {
    "MUI": {
        "dependencies": [
            "@mui/material",
            "@mui/icons-material",
            "@emotion/react",
            "@emotion/styled",
        ],
        "devDependencies": [],
    },
    "Tailwind": {
        "dependencies": [],
        "devDependencies": ["tailwindcss", "postcss", "autoprefixer"],
    },
    "Styled Components": {
        "dependencies": ["styled-components"],
        "devDependencies": [],
    },
}


@dataclass
class MissingDependencies:
    """缺失的依赖"""

    dependencies: List[str] = field(default_factory=list)
    dev_dependencies: List[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.dependencies and not self.dev_dependencies


def load_package_json(package_json_path: str) -> Optional[dict]:
    """读取 package.json；文件不存在或无法解析时打印原因并返回 None。"""
    path = os.path.abspath(package_json_path)
    if not os.path.exists(path):
        print(f"❌ 未找到 package.json: {path}")
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        print(f"❌ package.json 解析失败: {e}")
        return None


def find_missing_dependencies(frameworks: Sequence[str], package: dict) -> MissingDependencies:
    """对比 package.json，返回所选框架缺少的依赖（已在任一分组中声明的不算缺失）。"""
    existing = {**package.get("dependencies", {}), **package.get("devDependencies", {})}
    missing = MissingDependencies()

    for framework in frameworks:
        config = FRAMEWORK_DEP_MAP.get(framework)
        if config is None:
            continue
        for dep in config["dependencies"]:
            if dep not in existing and dep not in missing.dependencies:
                missing.dependencies.append(dep)
        for dep in config["devDependencies"]:
            if dep not in existing and dep not in missing.dev_dependencies:
                missing.dev_dependencies.append(dep)

    return missing


async def _run_npm(args: List[str], cwd: str) -> None:
    proc = await asyncio.create_subprocess_exec(
        "npm", *args,
        cwd=cwd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    _stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise RuntimeError(stderr.decode("utf-8", errors="replace").strip() or f"npm 退出码 {proc.returncode}")


async def install_dependencies(missing: MissingDependencies, package_json_path: str) -> bool:
    """在 package.json 所在目录执行 npm install，返回是否全部成功。"""
    cwd = os.path.dirname(os.path.abspath(package_json_path))
    try:
        if missing.dependencies:
            print(f"📥 正在安装: {' '.join(missing.dependencies)}")
            await _run_npm(["install", *missing.dependencies], cwd)
        if missing.dev_dependencies:
            print(f"📥 正在安装 (dev): {' '.join(missing.dev_dependencies)}")
            await _run_npm(["install", "-D", *missing.dev_dependencies], cwd)
    except (OSError, RuntimeError) as e:
        logger.warning("npm install 失败: %s", e)
        print(f"❌ 依赖安装失败: {e}")
        return False

    print("✅ 缺失的依赖已全部安装")
    return True
