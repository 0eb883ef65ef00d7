"""模型输出清洗"""

from utils.code_cleaner import clean_generated_code


class TestCleanGeneratedCode:
    def test_fenced_block(self):
        raw = "```typescript\nimport x from 'y';\nexport default x;\n```"
        assert clean_generated_code(raw) == "import x from 'y';\nexport default x;"

    def test_leading_prose_removed(self):
        raw = "Here is your component:\n\n```tsx\nimport React from 'react';\nexport const A = () => null;\n```\n"
        assert clean_generated_code(raw) == "import React from 'react';\nexport const A = () => null;"

    def test_trailing_prose_removed(self):
        code = "export interface Props {\n  title: string;\n}"
        raw = f"{code}\n\nThis component renders a title.\nNote: adjust as needed.\n"
        assert clean_generated_code(raw) == code

    def test_trailing_comments_removed(self):
        raw = "const a = 1;\n// end of file\n\n"
        assert clean_generated_code(raw) == "const a = 1;"

    def test_interior_lines_untouched(self):
        code = (
            "import React from 'react';\n"
            "\n"
            "// The main component\n"
            "export function Card() {\n"
            "  // This is a comment inside\n"
            "  return <div />;\n"
            "}"
        )
        assert clean_generated_code(code) == code

    def test_no_code_start_keeps_content(self):
        raw = "module.exports = {};\n"
        assert clean_generated_code(raw) == "module.exports = {};"

    def test_prose_word_needs_boundary(self):
        raw = "const a = 1;\nTheme.apply(a);\n"
        assert clean_generated_code(raw) == "const a = 1;\nTheme.apply(a);"

    def test_every_construct_is_code_start(self):
        for keyword in ("import", "export", "interface", "type", "const", "function", "class"):
            raw = f"Sure!\n{keyword} X"
            assert clean_generated_code(raw) == f"{keyword} X"

    def test_trailing_these_sentence_removed(self):
        raw = "export const A = 1;\nThese styles need Tailwind configured.\n"
        assert clean_generated_code(raw) == "export const A = 1;"
