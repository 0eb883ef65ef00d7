"""文件写入与依赖检查"""

import json
from unittest.mock import AsyncMock, patch

import pytest

from tools import dependency_tools
from tools.dependency_tools import (
    MissingDependencies,
    find_missing_dependencies,
    install_dependencies,
    load_package_json,
)
from tools.file_tools import ensure_directory, write_file
from utils.errors import FileWriteError


# ---------------------------------------------------------------------------
# file_tools
# ---------------------------------------------------------------------------


class TestWriteFile:
    def test_creates_parents_and_cleans(self, tmp_path):
        path = tmp_path / "Card" / "hooks" / "useCard.ts"
        content = write_file(str(path), "```ts\nexport const useCard = () => {};\n```")
        assert content == "export const useCard = () => {};"
        assert path.read_text(encoding="utf-8") == content

    def test_raw_write(self, tmp_path):
        css = ".card {\n  width: 10px;\n}\n\n"
        path = tmp_path / "styles" / "Card.css"
        assert write_file(str(path), css, clean=False) == css
        assert path.read_text(encoding="utf-8") == css

    def test_overwrites(self, tmp_path):
        path = tmp_path / "a.ts"
        write_file(str(path), "const a = 1;")
        write_file(str(path), "const a = 2;")
        assert path.read_text(encoding="utf-8") == "const a = 2;"

    def test_failure_names_path(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        target = blocker / "child.ts"
        with pytest.raises(FileWriteError) as exc_info:
            write_file(str(target), "const a = 1;")
        assert exc_info.value.path == str(target)

    def test_ensure_directory_idempotent(self, tmp_path):
        path = str(tmp_path / "out")
        assert ensure_directory(path) == path
        assert ensure_directory(path) == path


# ---------------------------------------------------------------------------
# dependency_tools
# ---------------------------------------------------------------------------


class TestDependencies:
    def test_missing(self):
        package = {
            "dependencies": {"react": "^18", "@mui/material": "^5"},
            "devDependencies": {"postcss": "^8"},
        }
        missing = find_missing_dependencies(["MUI", "Tailwind"], package)
        assert missing.dependencies == ["@mui/icons-material", "@emotion/react", "@emotion/styled"]
        assert missing.dev_dependencies == ["tailwindcss", "autoprefixer"]

    def test_declared_in_other_group_counts(self):
        package = {"devDependencies": {"styled-components": "^6"}}
        assert find_missing_dependencies(["Styled Components"], package).empty

    def test_load_package_json(self, tmp_path):
        path = tmp_path / "package.json"
        assert load_package_json(str(path)) is None
        path.write_text("{not json", encoding="utf-8")
        assert load_package_json(str(path)) is None
        path.write_text(json.dumps({"name": "app"}), encoding="utf-8")
        assert load_package_json(str(path)) == {"name": "app"}

    @pytest.mark.asyncio
    async def test_install_runs_npm(self, tmp_path):
        missing = MissingDependencies(dependencies=["styled-components"], dev_dependencies=["tailwindcss"])
        with patch.object(dependency_tools, "_run_npm", new=AsyncMock()) as run_npm:
            ok = await install_dependencies(missing, str(tmp_path / "package.json"))

        assert ok is True
        assert run_npm.await_args_list[0].args == (["install", "styled-components"], str(tmp_path))
        assert run_npm.await_args_list[1].args == (["install", "-D", "tailwindcss"], str(tmp_path))

    @pytest.mark.asyncio
    async def test_install_failure_is_soft(self, tmp_path):
        missing = MissingDependencies(dependencies=["styled-components"])
        failing = AsyncMock(side_effect=RuntimeError("ERESOLVE"))
        with patch.object(dependency_tools, "_run_npm", new=failing):
            assert await install_dependencies(missing, str(tmp_path / "package.json")) is False
