#!/usr/bin/env python3
"""
Tests for command resolution and alias expansion.
"""

import pytest

from gitrepl.core.aliases import AliasTable
from gitrepl.core.resolver import ResolvedCommand, resolve, tokenize


@pytest.fixture
def aliases():
    table = AliasTable()
    table.set("st", "status")
    table.set("ci", 'commit -m "wip"')
    table.set("lg", "log 5")
    return table


class TestTokenize:
    """Tests for whitespace tokenization."""

    def test_runs_of_whitespace(self):
        assert tokenize("  add   a.txt\tb.txt  ") == ["add", "a.txt", "b.txt"]

    def test_empty(self):
        assert tokenize("   ") == []


class TestResolve:
    """Tests for resolve()."""

    def test_plain_command(self):
        resolved = resolve("log 5")
        assert resolved == ResolvedCommand(verb="log", args=["5"])
        assert resolved.alias is None

    def test_verb_lower_cased_args_keep_case(self):
        resolved = resolve("CheckOut Feature/ABC")
        assert resolved.verb == "checkout"
        assert resolved.args == ["Feature/ABC"]

    def test_empty_input_rejected(self):
        with pytest.raises(ValueError):
            resolve("")
        with pytest.raises(ValueError):
            resolve("   \t ")

    def test_alias_expands(self, aliases):
        resolved = resolve("st", aliases)
        assert resolved.verb == "status"
        assert resolved.args == []
        assert resolved.alias == "st"

    def test_alias_appends_original_args(self, aliases):
        resolved = resolve("lg   --oneline   extra", aliases)
        assert resolved.verb == "log"
        assert resolved.args == ["5", "--oneline", "extra"]

    def test_alias_expansion_is_tokenized(self, aliases):
        resolved = resolve("ci", aliases)
        assert resolved.verb == "commit"
        assert resolved.args == ["-m", '"wip"']

    def test_single_level_expansion(self):
        """a -> b and b -> echo hi: resolving a stops at b."""
        table = AliasTable()
        table.set("a", "b")
        table.set("b", "echo hi")
        resolved = resolve("a", table)
        assert resolved.verb == "b"
        assert resolved.args == []

    def test_self_referencing_alias_does_not_loop(self):
        table = AliasTable()
        table.set("log", "log 3")
        resolved = resolve("log", table)
        assert resolved.verb == "log"
        assert resolved.args == ["3"]

    def test_alias_lookup_uses_lower_cased_verb(self, aliases):
        resolved = resolve("ST", aliases)
        assert resolved.verb == "status"
        assert resolved.alias == "st"

    def test_lookup_ignores_upper_case_names(self):
        """Names keep their case, but lookup goes through the lower-cased verb."""
        table = AliasTable()
        table.set("GS", "status")
        table.set("gs", "log")
        assert resolve("GS", table).verb == "log"
        assert resolve("Gs Extra", table).args == ["Extra"]

    def test_alias_can_shadow_builtin_verb(self):
        table = AliasTable()
        table.set("help", "status")
        assert resolve("help", table).verb == "status"

    def test_alias_to_empty_expansion_without_args(self):
        table = AliasTable()
        table.set("nothing", "")
        with pytest.raises(ValueError):
            resolve("nothing", table)

    def test_alias_to_empty_expansion_with_args(self):
        table = AliasTable()
        table.set("run", "")
        resolved = resolve("run Status", table)
        assert resolved.verb == "status"

    def test_expanded_verb_lower_cased(self):
        table = AliasTable()
        table.set("s", "STATUS Now")
        resolved = resolve("s", table)
        assert resolved.verb == "status"
        assert resolved.args == ["Now"]

    def test_line_property(self, aliases):
        assert resolve("lg extra", aliases).line == "log 5 extra"

    def test_no_alias_table(self):
        assert resolve("st").verb == "st"
