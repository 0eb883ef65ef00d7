"""任务提示词构建"""

from agents.prompt_builder import (
    build_component_task,
    build_hook_task,
    build_image_context,
    build_prompt,
    build_test_task,
    build_types_task,
)
from messages.design_messages import ImageImport

STRUCTURE = (
    "- Card (FRAME)\n"
    "  - Header (TEXT)\n"
    "  - Body (FRAME)\n"
)


def _image() -> ImageImport:
    return ImageImport(
        import_name="HeroImage",
        file_name="HeroImage.png",
        relative_path="./assets/HeroImage.png",
        node_id="1:2",
        node_name="Hero Image",
    )


class TestBuildPrompt:
    def test_order_of_name_framework_structure(self):
        prompt = build_prompt("card", STRUCTURE, "Tailwind")
        positions = [
            prompt.index("card"),
            prompt.index("Tailwind"),
            prompt.index("  - Header (TEXT)"),
            prompt.index("  - Body (FRAME)"),
        ]
        assert positions == sorted(positions)

    def test_deterministic(self):
        assert build_prompt("Card", STRUCTURE, "MUI") == build_prompt("Card", STRUCTURE, "MUI")

    def test_structure_verbatim(self):
        assert STRUCTURE in build_prompt("Card", STRUCTURE, "MUI and Tailwind")


class TestTasks:
    def test_file_paths(self):
        assert "components/Card/types/types.ts" in build_types_task("Card")
        assert "components/Card/hooks/useCard.ts" in build_hook_task("Card")
        assert "components/Card/__tests__/Card.test.tsx" in build_test_task("Card", "MUI")

    def test_component_task_without_images(self):
        task = build_component_task(build_prompt("Card", STRUCTURE, "MUI"), "Card", "MUI")
        assert task.startswith("创建一个像素级还原设计稿的 React 组件")
        assert "components/Card/Card.tsx" in task
        assert "./assets/" not in task

    def test_component_task_with_images(self):
        task = build_component_task("PROMPT", "Card", "MUI", [_image()])
        assert task.startswith("PROMPT\n\n")
        assert "import HeroImage from './assets/HeroImage.png';" in task

    def test_image_context_empty(self):
        assert build_image_context([]) == ""
