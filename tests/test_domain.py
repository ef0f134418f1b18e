"""Unit tests for henv.domain.envfile — pure parsing and classification."""

import pytest

from henv.domain.envfile import (
    extract_environment,
    is_env_file,
    mask_value,
    parse_env_file,
    should_skip_directory,
)
from henv.models import EnvVariable


class TestParseEnvFile:
    def test_parses_simple_content(self):
        """
        Given content with two KEY=value lines
        When parse_env_file is called
        Then it returns two variables in file order
        """
        result = parse_env_file("DB_HOST=localhost\nDB_PORT=5432")
        assert result == [
            EnvVariable(key="DB_HOST", value="localhost"),
            EnvVariable(key="DB_PORT", value="5432"),
        ]

    def test_strips_double_quotes(self):
        """
        Given a value wrapped in double quotes
        When parse_env_file is called
        Then the quotes are removed
        """
        assert parse_env_file('FOO="bar"') == [EnvVariable(key="FOO", value="bar")]

    def test_strips_single_quotes(self):
        """
        Given a value wrapped in single quotes
        When parse_env_file is called
        Then the quotes are removed
        """
        assert parse_env_file("FOO='bar baz'") == [EnvVariable(key="FOO", value="bar baz")]

    def test_mismatched_quotes_are_stripped_independently(self):
        """
        Given a value opening with a double quote and closing with a single quote
        When parse_env_file is called
        Then both quote characters are removed anyway
        """
        assert parse_env_file("FOO=\"bar'") == [EnvVariable(key="FOO", value="bar")]

    def test_unbalanced_leading_quote_is_stripped(self):
        """
        Given a value with only a leading quote
        When parse_env_file is called
        Then the leading quote is removed
        """
        assert parse_env_file('FOO="bar') == [EnvVariable(key="FOO", value="bar")]

    def test_inner_quotes_are_kept(self):
        """
        Given a quoted value that itself contains quotes
        When parse_env_file is called
        Then only the outermost characters are stripped
        """
        assert parse_env_file("MSG=\"it's \"fine\"\"")[0].value == "it's \"fine\""

    def test_skips_comments_and_blank_lines(self):
        """
        Given content with comments, indented comments and blank lines
        When parse_env_file is called
        Then only the assignment produces a variable
        """
        content = "# header\n\n   \n   # indented comment\nA=1\n"
        assert parse_env_file(content) == [EnvVariable(key="A", value="1")]

    def test_whitespace_around_equals_is_ignored(self):
        """
        Given a line with spaces around the = sign and trailing spaces
        When parse_env_file is called
        Then key and value are trimmed
        """
        assert parse_env_file("  KEY  =   value   ") == [EnvVariable(key="KEY", value="value")]

    def test_value_may_contain_equals(self):
        """
        Given a value that itself contains = signs
        When parse_env_file is called
        Then the value is everything after the first =
        """
        assert parse_env_file("TOKEN=abc=def==")[0].value == "abc=def=="

    def test_empty_value_is_preserved(self):
        """
        Given a line KEY= with no value
        When parse_env_file is called
        Then the variable has an empty value
        """
        assert parse_env_file("EMPTY=") == [EnvVariable(key="EMPTY", value="")]

    @pytest.mark.parametrize(
        "line",
        ["export FOO=bar", "1FOO=bar", "FOO-BAR=baz", "just text", "=value", "  continued line"],
    )
    def test_malformed_lines_are_dropped(self, line: str):
        """
        Given a line that is not a plain IDENT=value assignment
        When parse_env_file is called
        Then no variable is produced and nothing is raised
        """
        assert parse_env_file(line) == []

    def test_duplicate_keys_are_kept_in_order(self):
        """
        Given the same key assigned twice
        When parse_env_file is called
        Then both assignments survive in file order
        """
        result = parse_env_file("A=1\nB=2\nA=3")
        assert [(v.key, v.value) for v in result] == [("A", "1"), ("B", "2"), ("A", "3")]

    def test_windows_line_endings(self):
        """
        Given content using CRLF line endings
        When parse_env_file is called
        Then values carry no trailing carriage return
        """
        assert parse_env_file("A=1\r\nB=2\r\n") == [
            EnvVariable(key="A", value="1"),
            EnvVariable(key="B", value="2"),
        ]

    def test_returns_empty_list_for_empty_content(self):
        assert parse_env_file("") == []


class TestEnvFileClassification:
    @pytest.mark.parametrize("name", [".env", ".env.production", ".env.local", ".env.test_1"])
    def test_env_file_names_match(self, name: str):
        assert is_env_file(name) is True

    @pytest.mark.parametrize(
        "name",
        [".env.local.bak", "env", ".envrc", ".env.", "app.env", ".env-prod", "x.env.production",
         ".env.prod\u00e9", ".env.prod\n"],
    )
    def test_other_names_do_not_match(self, name: str):
        assert is_env_file(name) is False

    def test_plain_env_is_default(self):
        """
        Given the file name .env
        When extract_environment is called
        Then the label is "default"
        """
        assert extract_environment(".env") == "default"

    def test_suffix_becomes_label(self):
        """
        Given the file name .env.production
        When extract_environment is called
        Then the label is "production"
        """
        assert extract_environment(".env.production") == "production"

    def test_empty_suffix_falls_back_to_default(self):
        assert extract_environment(".env.") == "default"


class TestShouldSkipDirectory:
    @pytest.mark.parametrize(
        "name",
        ["node_modules", ".git", ".next", "dist", "build", "coverage", ".nyc_output",
         "logs", ".cache", "vendor", "target", "bin", ".hidden", ".venv"],
    )
    def test_excluded_directories_are_skipped(self, name: str):
        assert should_skip_directory(name) is True

    @pytest.mark.parametrize("name", ["src", "apps", "packages", "Build", "node_modules_old"])
    def test_regular_directories_are_descended(self, name: str):
        assert should_skip_directory(name) is False


class TestMaskValue:
    def test_long_value_is_truncated(self):
        """
        Given a 21 character value
        When mask_value is called
        Then it renders as the first 10 chars, an ellipsis and the last 5
        """
        assert mask_value("secret123456789012345") == "secret1234...12345"

    def test_twenty_characters_are_left_alone(self):
        value = "a" * 20
        assert mask_value(value) == value

    def test_short_value_is_unchanged(self):
        assert mask_value("prodkey") == "prodkey"

    def test_disabled_masking_returns_value(self):
        value = "x" * 40
        assert mask_value(value, enabled=False) == value
