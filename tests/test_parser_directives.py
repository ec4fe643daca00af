"""
Directive parser tests

Tests bare and parenthesized directive bodies, argument decoding and
the diagnostics for malformed directives.
"""

import pytest

from incode.lib.errors import DirectiveSyntaxError
from incode.lib.parser import directive_parse, parenthesis_findMatching
from incode.models.directives import DirectiveType


class TestBareDirectives:
    """Test directives written without parentheses"""

    def test_begin(self):
        """begin has no argument"""
        assert directive_parse("begin") == (DirectiveType.BEGIN, None)

    def test_end(self):
        """end has no argument"""
        assert directive_parse("end") == (DirectiveType.END, None)

    def test_trailing_whitespace_ignored(self):
        """Trailing spaces and carriage return are not part of the name"""
        assert directive_parse("end \r") == (DirectiveType.END, None)

    @pytest.mark.parametrize("name,label", [("assign", "Assign"), ("merge", "Merge"), ("emit", "Emit")])
    def test_missing_arguments(self, name, label):
        """assign/merge/emit require parentheses"""
        with pytest.raises(DirectiveSyntaxError, match=f"{label} directive should have arguments"):
            directive_parse(name)

    def test_unknown_name(self):
        """Unknown names are rejected"""
        with pytest.raises(DirectiveSyntaxError, match="Invalid directive type: start"):
            directive_parse("start")

    def test_name_is_case_sensitive(self):
        """Directive names are lowercase"""
        with pytest.raises(DirectiveSyntaxError, match="Invalid directive type"):
            directive_parse("Begin")


class TestParenthesizedDirectives:
    """Test directives with an argument list"""

    def test_begin_with_arguments(self):
        """begin must not have parentheses"""
        with pytest.raises(DirectiveSyntaxError, match="Begin directive should not have arguments"):
            directive_parse("begin()")

    def test_end_with_arguments(self):
        """end must not have parentheses"""
        with pytest.raises(DirectiveSyntaxError, match="End directive should not have arguments"):
            directive_parse('end("x")')

    def test_unknown_name_with_arguments(self):
        """Name before the parenthesis is validated"""
        with pytest.raises(DirectiveSyntaxError, match="Invalid directive type: set"):
            directive_parse('set({"a": 1})')

    def test_missing_closing_parenthesis(self):
        """Unbalanced parentheses are reported"""
        with pytest.raises(DirectiveSyntaxError, match="Unable to find closing parenthesis"):
            directive_parse('emit("x"')

    def test_trailing_comment_ignored(self):
        """Text after the argument list, even with parentheses, is ignored"""
        assert directive_parse('emit("x") // regenerate (see docs)') == (DirectiveType.EMIT, ["x"])

    def test_trailing_comment_after_object(self):
        """Trailing text after an assign argument is ignored"""
        assert directive_parse('assign({"a": 1}) // note)') == (DirectiveType.ASSIGN, {"a": 1})


class TestAssignMergeArguments:
    """Test object arguments of assign and merge"""

    def test_assign_object(self):
        """assign decodes a JSON object"""
        assert directive_parse('assign({"schema":"User"})') == (
            DirectiveType.ASSIGN,
            {"schema": "User"},
        )

    def test_merge_nested_object(self):
        """merge decodes nested objects"""
        directive_type, arg = directive_parse('merge({"a": {"b": [1, 2]}})')
        assert directive_type is DirectiveType.MERGE
        assert arg == {"a": {"b": [1, 2]}}

    def test_empty_object(self):
        """An empty object is a valid argument"""
        assert directive_parse("assign({})") == (DirectiveType.ASSIGN, {})

    @pytest.mark.parametrize("arg", ["[1, 2]", "null", "1", '"text"', "true"])
    def test_non_object_rejected(self, arg):
        """Arrays, null and scalars are not objects"""
        with pytest.raises(DirectiveSyntaxError, match="Assign directive. Argument should have an object type"):
            directive_parse(f"assign({arg})")

    def test_merge_array_rejected(self):
        """merge reports its own kind"""
        with pytest.raises(DirectiveSyntaxError, match="Invalid Merge directive"):
            directive_parse("merge([])")

    def test_malformed_json(self):
        """Malformed JSON error quotes the argument text"""
        with pytest.raises(DirectiveSyntaxError, match=r'Unable to parse directive argument "\{bad json\}"'):
            directive_parse("assign({bad json})")

    def test_empty_argument(self):
        """assign() has no JSON value"""
        with pytest.raises(DirectiveSyntaxError, match="Unable to parse directive argument"):
            directive_parse("assign()")

    def test_nan_rejected(self):
        """Non-JSON constants are rejected"""
        with pytest.raises(DirectiveSyntaxError, match="Unable to parse directive argument"):
            directive_parse('assign({"a": NaN})')

    def test_parenthesis_inside_string(self):
        """A ")" inside a string does not close the argument list"""
        assert directive_parse('assign({"a": "x)y("})') == (DirectiveType.ASSIGN, {"a": "x)y("})


class TestEmitArguments:
    """Test value lists of emit"""

    def test_single_string(self):
        """One string argument"""
        assert directive_parse('emit("pck")') == (DirectiveType.EMIT, ["pck"])

    def test_zero_arguments(self):
        """emit() produces an empty argument list"""
        assert directive_parse("emit()") == (DirectiveType.EMIT, [])

    def test_mixed_values(self):
        """Any JSON values are accepted"""
        directive_type, arg = directive_parse('emit("a", 1, 2.5, true, null, {"k": [1]}, [])')
        assert directive_type is DirectiveType.EMIT
        assert arg == ["a", 1, 2.5, True, None, {"k": [1]}, []]

    def test_malformed_values(self):
        """Error quotes the wrapped argument list"""
        with pytest.raises(DirectiveSyntaxError, match=r'"\[a, b\]"'):
            directive_parse("emit(a, b)")

    def test_escaped_quote_in_string(self):
        """Escaped quotes keep the scanner inside the string"""
        assert directive_parse(r'emit("say \")\"")') == (DirectiveType.EMIT, ['say ")"'])


class TestParenthesisMatching:
    """Test the argument list scanner"""

    def test_nested_parentheses(self):
        """Depth tracking"""
        assert parenthesis_findMatching("a((b))c", 1) == 5

    def test_string_contents_skipped(self):
        """Parentheses in strings are ignored"""
        assert parenthesis_findMatching('emit(")", 1)', 4) == 11

    def test_unterminated(self):
        """EOF before match"""
        with pytest.raises(DirectiveSyntaxError):
            parenthesis_findMatching("emit((1)", 4)
