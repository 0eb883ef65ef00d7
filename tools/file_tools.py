"""
文件写入工具

所有生成结果都经由这里写盘：自动创建父目录，写入前可选清洗模型输出，
失败时包装为 FileWriteError（带目标路径）。
"""
import os

from utils.code_cleaner import clean_generated_code
from utils.errors import FileWriteError


def ensure_directory(path: str) -> str:
    """创建目录（已存在时不做任何事），返回该路径。"""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise FileWriteError(path, e) from e
    return path


def write_file(file_path: str, content: str, clean: bool = True) -> str:
    """将内容写入指定文件。

    Args:
        file_path: 目标文件路径
        content: 文件内容（通常是模型原始回复）
        clean: 是否先去掉 markdown 围栏和说明文字

    Returns:
        实际写入的内容

    Raises:
        FileWriteError: 创建目录或写入失败
    """
    if clean:
        content = clean_generated_code(content)
    parent = os.path.dirname(file_path)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FileWriteError(file_path, e) from e
    return content
