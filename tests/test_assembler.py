import re

import pytest

from ctg.config import EmbeddedLanguage, load_languages
from ctg.errors import ConfigError
from ctg.grammar.assembler import (
    all_identifiers,
    build_basic_grammar,
    build_reinjection_grammar,
    shared_aliases,
)
from ctg.grammar.regex import escape_regexp
from ctg.grammar.schema import IncludeRule


def test_sql_scenario(fsharp_host, sql):
    grammar = build_basic_grammar(fsharp_host, [sql])
    assert list(grammar.repository) == ["commentTaggedTemplate-sql"]
    assert r"\b(?:sql|postgres)\b" in grammar.repository["commentTaggedTemplate-sql"].begin
    assert grammar.scope_name == "inline.fsharp.template-tagged-languages"
    assert grammar.file_types == []


def test_dispatch_rule(fsharp_host, js_and_python):
    grammar = build_basic_grammar(fsharp_host, js_and_python)
    assert len(grammar.patterns) == 1
    outer = grammar.patterns[0]
    assert outer.name is None and outer.content_name is None
    assert outer.begin == r'(?i)(\()(?=(\*\s*\b(?:js|javascript|python|py)\b\s*\*\))\s*""")'
    assert outer.end == '(""")'
    assert {k: c.name for k, c in outer.end_captures.items()} == {
        "0": "string.quoted.double.fsharp",
        "1": "punctuation.definition.string.end.fsharp",
    }
    assert outer.patterns == [
        IncludeRule(include="#commentTaggedTemplate-js"),
        IncludeRule(include="#commentTaggedTemplate-python"),
    ]


def test_repository_matches_dispatch_includes(js_host):
    languages = load_languages()
    grammar = build_basic_grammar(js_host, languages)
    keys = list(grammar.repository)
    assert keys == [f"commentTaggedTemplate-{lang.name}" for lang in languages]
    includes = [rule.include for rule in grammar.patterns[0].patterns]
    assert includes == ["#" + k for k in keys]
    assert len(set(includes)) == len(includes)


def test_outer_union_is_concatenation_of_all_aliases(js_host):
    languages = load_languages()
    grammar = build_basic_grammar(js_host, languages)
    union = "|".join(escape_regexp(a) for lang in languages for a in lang.identifiers)
    assert f"(?:{union})" in grammar.patterns[0].begin
    assert all_identifiers(languages) == [a for lang in languages for a in lang.identifiers]


def test_all_identifiers_keeps_table_order(js_and_python, sql):
    assert all_identifiers([sql, *js_and_python]) == ["sql", "postgres", "js", "javascript", "python", "py"]
    assert all_identifiers([*js_and_python, sql]) == ["js", "javascript", "python", "py", "sql", "postgres"]


def test_generated_begins_compile(js_host, fsharp_host):
    languages = load_languages()
    for host in (js_host, fsharp_host):
        grammar = build_basic_grammar(host, languages)
        re.compile(grammar.patterns[0].begin)
        for pattern in grammar.repository.values():
            re.compile(pattern.begin)


def test_outer_rule_consumes_only_comment_start(js_host, js_and_python):
    outer = build_basic_grammar(js_host, js_and_python).patterns[0]
    m = re.compile(outer.begin).search("const q = /* Python */ `print(1)`;")
    assert m is not None
    assert m.group(0) == "/"
    assert m.group(2) == "* Python */"


def test_duplicate_names_are_rejected(js_host):
    dup = [
        EmbeddedLanguage(name="sql", identifiers=("sql",), source="source.sql"),
        EmbeddedLanguage(name="sql", identifiers=("pg",), source="source.sql"),
    ]
    with pytest.raises(ConfigError):
        build_basic_grammar(js_host, dup)


def test_shared_alias_first_declared_wins(js_host):
    languages = [
        EmbeddedLanguage(name="glsl", identifiers=("glsl", "shader"), source="source.glsl"),
        EmbeddedLanguage(name="hlsl", identifiers=("hlsl", "Shader"), source="source.hlsl"),
    ]
    assert shared_aliases(languages) == {"shader": ["glsl", "hlsl"]}
    grammar = build_basic_grammar(js_host, languages)
    includes = [rule.include for rule in grammar.patterns[0].patterns]
    assert includes[0] == "#commentTaggedTemplate-glsl"


def test_alias_repeated_within_one_language_is_not_shared():
    lang = EmbeddedLanguage(name="sql", identifiers=("sql", "SQL"), source="source.sql")
    assert shared_aliases([lang]) == {}


def test_reinjection_grammar(js_host, js_and_python):
    doc = build_reinjection_grammar(js_host, js_and_python)
    assert doc.scope_name == "inline.javascript.template-tagged-languages.reinjection"
    assert doc.patterns == [IncludeRule(include="source.ts#template-substitution-element")]
    assert doc.injection_selector.startswith("L:source.js (meta.embedded.block.js, meta.embedded.block.python)")


def test_hosts_are_independent(js_host, fsharp_host, sql):
    a = build_basic_grammar(js_host, [sql])
    b = build_basic_grammar(fsharp_host, [sql])
    assert a.scope_name != b.scope_name
    assert "fsharp" not in a.model_dump_json()
    assert "javascript" not in b.model_dump_json()
