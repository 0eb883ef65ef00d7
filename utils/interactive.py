"""
终端交互式问答

所有函数都接受 input_func（默认 input），便于测试时注入预设答案。
输入不合法时打印提示并重新询问。
"""
from typing import Callable, List, Optional, Sequence

InputFunc = Callable[[str], str]
Validator = Callable[[str], Optional[str]]


def _match_choice(answer: str, choices: Sequence[str]) -> Optional[str]:
    """按序号（从 1 开始）或名称（不区分大小写）匹配选项。"""
    answer = answer.strip()
    if answer.isdigit():
        index = int(answer) - 1
        if 0 <= index < len(choices):
            return choices[index]
        return None
    for choice in choices:
        if choice.lower() == answer.lower():
            return choice
    return None


def _print_choices(message: str, choices: Sequence[str]) -> None:
    print(f"\n{message}")
    for i, choice in enumerate(choices, 1):
        print(f"  [{i}] {choice}")


def ask_text(
    message: str,
    default: Optional[str] = None,
    validate: Optional[Validator] = None,
    input_func: InputFunc = input,
) -> str:
    """询问一行文本；validate 返回非 None 时视为错误提示。"""
    suffix = f" ({default})" if default else ""
    while True:
        answer = input_func(f"{message}{suffix}: ").strip()
        if not answer and default is not None:
            answer = default
        error = validate(answer) if validate else None
        if error is None:
            return answer
        print(f"  ✗ {error}")


def ask_choice(message: str, choices: Sequence[str], input_func: InputFunc = input) -> str:
    """单选。"""
    _print_choices(message, choices)
    while True:
        answer = input_func("请输入序号或名称: ")
        choice = _match_choice(answer, choices)
        if choice is not None:
            return choice
        print(f"  ✗ 无效选项: {answer.strip()}")


def ask_multi_choice(message: str, choices: Sequence[str], input_func: InputFunc = input) -> List[str]:
    """多选（逗号分隔），至少选择一项；结果按选项原始顺序去重。"""
    _print_choices(message, choices)
    while True:
        answer = input_func("请输入序号或名称（多个用逗号分隔）: ")
        parts = [part for part in answer.split(",") if part.strip()]
        selected = [_match_choice(part, choices) for part in parts]
        if not selected:
            print("  ✗ 至少选择一项")
            continue
        if None in selected:
            invalid = [part.strip() for part, sel in zip(parts, selected) if sel is None]
            print(f"  ✗ 无效选项: {', '.join(invalid)}")
            continue
        return [choice for choice in choices if choice in selected]


def ask_confirm(message: str, default: bool = False, input_func: InputFunc = input) -> bool:
    """是 / 否确认，直接回车取默认值。"""
    hint = "Y/n" if default else "y/N"
    while True:
        answer = input_func(f"{message} [{hint}]: ").strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes", "是"):
            return True
        if answer in ("n", "no", "否"):
            return False
        print("  ✗ 请输入 y 或 n")
