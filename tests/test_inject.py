"""
End-to-end injection tests

Tests the full pipeline: annotated source -> regions -> render callback ->
rewritten source.
"""

import pytest

from incode import inject, matcher_create, regions_extract
from incode.lib.errors import InvalidDirectiveError, InvalidRegionError
from incode.lib.injector import newline_surround


SOURCE = """\
class User:
    // inj:assign({"schema": "User"})
    // inj:begin
    // inj:merge({"fields": {"id": "int"}})
    // inj:emit("fields")
    id = None
    // inj:end
    // inj:end

    // inj:emit("methods", 2)
    def old(self):
        pass
    // inj:end
"""


class TestInject:
    """Test text replacement"""

    def test_round_trip(self):
        """Rendering the current content reproduces the input"""
        output = inject(SOURCE, lambda region: SOURCE[region.start:region.end])
        assert output == SOURCE

    def test_replacement(self):
        """Region content is replaced and directive lines are kept"""
        def render(region):
            if region.args[0] == "fields":
                return "\n".join(
                    f"{region.padding}{name}: {kind}"
                    for name, kind in region.data["fields"].items()
                )
            return f"{region.padding}# {region.data['schema']} x{region.args[1]}"

        output = inject(SOURCE, render)

        assert "    id: int\n    // inj:end" in output
        assert '    // inj:emit("methods", 2)\n    # User x2\n    // inj:end\n' in output
        assert "def old" not in output
        assert output.count("// inj:") == SOURCE.count("// inj:")

    def test_empty_render(self):
        """Empty output leaves an empty region"""
        text = "// inj:emit()\nold\n// inj:end\n"
        assert inject(text, lambda region: "") == "// inj:emit()\n// inj:end\n"

    def test_render_with_newlines(self):
        """Leading and trailing newlines are not doubled"""
        text = "// inj:emit()\nold\n// inj:end\n"
        assert inject(text, lambda region: "\nnew\n") == "// inj:emit()\nnew\n// inj:end\n"

    def test_initial_data_passed_through(self):
        """inject forwards initial data to extraction"""
        text = "// inj:emit()\n// inj:end"
        output = inject(text, lambda region: region.data["name"], data={"name": "v"})
        assert output == "// inj:emit()\nv\n// inj:end"

    def test_text_without_directives(self):
        """Nothing to replace"""
        assert inject("a\nb\n", lambda region: "x") == "a\nb\n"

    def test_render_called_in_order(self):
        """Callback sees regions in source order"""
        seen = []
        inject(SOURCE, lambda region: seen.append(region.args[0]) or "")
        assert seen == ["fields", "methods"]

    def test_custom_matcher(self):
        """Directives with another prefix are used when requested"""
        text = "# gen:emit(1)\nold\n# gen:end\n// inj:emit(2)\n"
        output = inject(text, lambda region: "new", matcher=matcher_create("gen", "#"))
        assert output == "# gen:emit(1)\nnew\n# gen:end\n// inj:emit(2)\n"

    def test_errors_propagate(self):
        """No partial output on malformed input"""
        with pytest.raises(InvalidDirectiveError, match=r"^\[2:1\]"):
            inject("x\n// inj:bogus\n", lambda region: "")
        with pytest.raises(InvalidRegionError):
            inject("// inj:begin\n", lambda region: "")

    def test_matcher_is_keyword_only(self):
        """A matcher passed in the render position is rejected"""
        with pytest.raises(TypeError):
            inject("a\n", lambda region: "", matcher_create("gen"))

    def test_extract_matches_inject(self):
        """Regions seen by render are the extracted regions"""
        seen = []
        inject(SOURCE, lambda region: seen.append(region) or "")
        assert seen == regions_extract(SOURCE)


class TestNewlineSurround:
    """Test render output normalization"""

    @pytest.mark.parametrize("value,expected", [
        ("", "\n"),
        ("\n", "\n"),
        ("a", "\na\n"),
        ("a\n", "\na\n"),
        ("\na", "\na\n"),
        ("\na\n", "\na\n"),
    ])
    def test_normalization(self, value, expected):
        """Exactly one leading and trailing newline is guaranteed"""
        assert newline_surround(value) == expected
