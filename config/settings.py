"""
全局配置 — 凭证、模型参数、图片提取参数、输出路径等
"""
import os

from dotenv import load_dotenv

# ============================================================
# 项目根目录
# ============================================================
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 加载 .env 文件（项目根目录优先，其次当前工作目录）
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))
load_dotenv()

# ============================================================
# 凭证
# ============================================================
FIGMA_API_KEY = os.getenv("FIGMA_API_KEY", "")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
CLAUDE_API_KEY = os.getenv("CLAUDE_API_KEY", "")

# 模型提供方 → 凭证环境变量名
PROVIDER_KEY_ENV: dict[str, str] = {
    "OpenAI": "OPENAI_API_KEY",
    "Claude": "CLAUDE_API_KEY",
}

# ============================================================
# 模型配置（每个提供方固定模型与解码参数）
# ============================================================
PROVIDERS = ("OpenAI", "Claude")

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.2"))
OPENAI_MAX_TOKENS = int(os.getenv("OPENAI_MAX_TOKENS", "2048"))

CLAUDE_MODEL = os.getenv("CLAUDE_MODEL", "claude-3-5-sonnet-20241022")
CLAUDE_TEMPERATURE = float(os.getenv("CLAUDE_TEMPERATURE", "0.2"))
CLAUDE_MAX_TOKENS = int(os.getenv("CLAUDE_MAX_TOKENS", "4096"))

# ============================================================
# Figma 配置
# ============================================================
FIGMA_API_BASE = os.getenv("FIGMA_API_BASE", "https://api.figma.com")
FIGMA_TIMEOUT = float(os.getenv("FIGMA_TIMEOUT", "60"))

# ============================================================
# 图片提取
# ============================================================
# 节点名称包含以下关键词（不区分大小写）时视为图片候选
IMAGE_NAME_KEYWORDS: tuple[str, ...] = tuple(
    kw.strip().lower()
    for kw in os.getenv("IMAGE_NAME_KEYWORDS", "image,img,photo,picture,icon,logo").split(",")
    if kw.strip()
)
# 按名称判断时只考虑这些节点类型
IMAGE_NODE_TYPES = ("RECTANGLE", "ELLIPSE", "INSTANCE", "COMPONENT")

IMAGE_FORMAT = os.getenv("IMAGE_FORMAT", "png")
IMAGE_SCALE = int(os.getenv("IMAGE_SCALE", "2"))
IMAGE_LIST_TIMEOUT = float(os.getenv("IMAGE_LIST_TIMEOUT", "30"))       # 批量获取图片 URL
IMAGE_DOWNLOAD_TIMEOUT = float(os.getenv("IMAGE_DOWNLOAD_TIMEOUT", "15"))  # 单张图片下载
ASSETS_DIR_NAME = "assets"

# ============================================================
# 样式框架
# ============================================================
FRAMEWORKS = ("MUI", "Tailwind", "Styled Components")

# ============================================================
# 输出目录
# ============================================================
OUTPUT_DIR = os.getenv("OUTPUT_DIR", ".")
DEFAULT_OUTPUT = os.path.join(OUTPUT_DIR, os.getenv("OUTPUT_COMPONENT_DIR", "generated"))
PACKAGE_JSON_PATH = os.path.join(OUTPUT_DIR, os.getenv("PACKAGE_JSON_PATH", "package.json"))


def get_api_key(provider: str) -> str:
    """返回指定模型提供方的 API Key（未配置时返回空字符串）。"""
    keys = {
        "OpenAI": OPENAI_API_KEY,
        "Claude": CLAUDE_API_KEY,
    }
    return keys.get(provider, "")
