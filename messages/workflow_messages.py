"""
工作流控制数据类 — 阶段、运行状态，与编排逻辑解耦
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class WorkflowPhase(Enum):
    """工作流阶段枚举（严格按顺序执行）"""

    INIT = "init"
    FETCH_DESIGN = "fetch_design"
    COLLECT_OPTIONS = "collect_options"
    EXTRACT_IMAGES = "extract_images"
    CHECK_DEPENDENCIES = "check_dependencies"
    GENERATE = "generate"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class WorkflowState:
    """工作流运行时状态"""

    phase: WorkflowPhase = WorkflowPhase.INIT
    written_files: List[str] = field(default_factory=list)   # 已写入磁盘的文件（中途失败时保留）
    image_count: int = 0
    component_dir: str = ""
