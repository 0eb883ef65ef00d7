"""
模型输出清洗 — 去掉 markdown 代码围栏以及代码前后的说明文字

只裁剪首尾，中间的代码行原样保留。
"""
import re

# 开头围栏（可带语言标记）与结尾围栏
_FENCE_RE = re.compile(r"```[\w+-]*\n?")

# 代码起始标志：行首的 import / export / interface / type / const / function / class
_CODE_START_RE = re.compile(
    r"^(?:import|export|interface|type|const|function|class)\b",
    re.MULTILINE,
)

# 结尾说明文字常见的开头
_PROSE_LEAD_RE = re.compile(r"^(?:(?:This|These|Required|The)\b|Note:)")


def _is_code_line(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return False
    if stripped.startswith("//"):
        return False
    return _PROSE_LEAD_RE.match(stripped) is None


def clean_generated_code(content: str) -> str:
    """从模型原始回复中提取可直接写入文件的源代码。

    1. 删除所有 ``` 围栏标记
    2. 丢弃第一处代码起始行之前的内容（找不到起始行时保留全部）
    3. 从末尾向前丢弃空行、// 注释行和说明文字行
    """
    cleaned = _FENCE_RE.sub("", content)

    match = _CODE_START_RE.search(cleaned)
    if match and match.start() > 0:
        cleaned = cleaned[match.start():].strip()

    lines = cleaned.split("\n")
    for index in range(len(lines) - 1, -1, -1):
        if _is_code_line(lines[index]):
            cleaned = "\n".join(lines[: index + 1])
            break

    return cleaned.strip()
