"""Hooks applied to generated command files before they are written.

Example usage:
    from gql_oclif.core.hooks import AddHeaderHook, HookRunner

    runner = HookRunner()
    runner.add_post_hook(AddHeaderHook("Generated by gql-oclif - do not edit"))
    content = runner.run_post_hooks("list-widgets.ts", content)
"""

from typing import Protocol, runtime_checkable

TS_COMMENT_PREFIXES = ("//", "/*", "*")


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for hooks that transform a generated TypeScript file."""

    def post_generate(self, filename: str, content: str) -> str:
        """Return the (possibly transformed) contents of ``filename``."""
        ...


def as_ts_comment(text: str) -> str:
    """Turn header text into TypeScript line comments.

    Lines that already are comments are kept as written:

        "Generated\\n// do not edit"  ->  "// Generated\\n// do not edit"
    """
    lines = []
    for line in text.rstrip("\n").splitlines():
        stripped = line.strip()
        if not stripped:
            lines.append("//")
        elif stripped.startswith(TS_COMMENT_PREFIXES):
            lines.append(line)
        else:
            lines.append(f"// {line}")
    return "\n".join(lines)


class AddHeaderHook:
    """Prepend a comment header to every generated command.

    Example:
        hook = AddHeaderHook("Auto-generated by gql-oclif")
        hook.post_generate("list.ts", source)  # "// Auto-generated by gql-oclif\\n\\n..."
    """

    def __init__(self, header: str):
        self.header = as_ts_comment(header)

    def post_generate(self, _filename: str, content: str) -> str:
        if not self.header:
            return content
        return f"{self.header}\n\n{content}"


class HookRunner:
    """Runs post-generation hooks in the order they were added."""

    def __init__(self):
        self.post_hooks: list[PostGenerateHook] = []

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
