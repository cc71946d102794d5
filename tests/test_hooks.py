"""Tests for hooks applied to generated command files."""

from gql_oclif.core.hooks import AddHeaderHook, HookRunner, PostGenerateHook, as_ts_comment

COMMAND = "export default class ListWidgets extends Command {}\n"


class TestAsTsComment:
    """Tests for turning header text into TypeScript comments."""

    def test_plain_text(self):
        assert as_ts_comment("Generated by gql-oclif") == "// Generated by gql-oclif"

    def test_existing_comment_kept(self):
        assert as_ts_comment("// Generated") == "// Generated"

    def test_block_comment_kept(self):
        header = "/**\n * Generated\n */"
        assert as_ts_comment(header) == header

    def test_mixed_lines(self):
        assert as_ts_comment("Generated\n\n// do not edit\n") == "// Generated\n//\n// do not edit"


class TestAddHeaderHook:
    """Tests for AddHeaderHook."""

    def test_plain_header_becomes_comment(self):
        result = AddHeaderHook("Generated by gql-oclif").post_generate("list.ts", COMMAND)
        assert result == "// Generated by gql-oclif\n\n" + COMMAND

    def test_comment_header_not_doubled(self):
        result = AddHeaderHook("// Generated\n").post_generate("list.ts", COMMAND)
        assert result == "// Generated\n\n" + COMMAND

    def test_empty_header_is_noop(self):
        assert AddHeaderHook("").post_generate("list.ts", COMMAND) == COMMAND


class TestHookRunner:
    """Tests for HookRunner."""

    def test_no_hooks_is_identity(self):
        assert HookRunner().run_post_hooks("list.ts", COMMAND) == COMMAND

    def test_hooks_run_in_order(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("inner"))
        runner.add_post_hook(AddHeaderHook("outer"))

        result = runner.run_post_hooks("list.ts", COMMAND)
        assert result == "// outer\n\n// inner\n\n" + COMMAND

    def test_hook_receives_filename(self):
        seen = []

        class RecordingHook:
            def post_generate(self, filename, content):
                seen.append(filename)
                return content

        runner = HookRunner()
        runner.add_post_hook(RecordingHook())
        runner.run_post_hooks("widgets/list.ts", COMMAND)
        assert seen == ["widgets/list.ts"]


def test_add_header_follows_protocol():
    assert isinstance(AddHeaderHook("header"), PostGenerateHook)
