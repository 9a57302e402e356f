import pytest
from gerrit_rest.core.urls import (
    append_query,
    build_url,
    encode_query,
    expand_path,
    options_to_params,
    quote_segment,
    search_query_keys,
)
from gerrit_rest.models import FilesOptions, ProjectOptions, QueryChangeOptions


def test_build_url_joins_relative_path():
    assert build_url("https://example.com", "projects/") == (
        "https://example.com/projects/"
    )
    assert (
        build_url("https://example.com/gerrit/", "/projects/")
        == "https://example.com/gerrit/projects/"
    )


def test_build_url_strips_every_leading_slash():
    assert build_url("https://example.com/", "//projects/") == (
        "https://example.com/projects/"
    )


def test_build_url_adds_authenticated_prefix_once():
    assert (
        build_url("https://example.com/", "changes/", authenticated=True)
        == "https://example.com/a/changes/"
    )
    assert (
        build_url("https://example.com/", "a/changes/", authenticated=True)
        == "https://example.com/a/changes/"
    )


def test_quote_segment_escapes_slashes():
    assert quote_segment("plugins/delete-project") == "plugins%2Fdelete-project"
    assert quote_segment(7) == "7"


def test_expand_path_fills_each_placeholder():
    path = expand_path("projects/{}/branches/{}", "plugins/x", "refs/heads/master")
    assert path == "projects/plugins%2Fx/branches/refs%2Fheads%2Fmaster"


def test_encode_query_keeps_search_operators():
    params = {"q": "status:open+is:watched", "n": 2}
    assert encode_query(params, search_keys={"q"}) == "n=2&q=status:open+is:watched"
    assert encode_query({"q": "owner:self status:open"}, search_keys={"q"}) == (
        "q=owner:self+status:open"
    )


def test_encode_query_escapes_plain_q():
    assert encode_query({"q": "c++:x"}) == "q=c%2B%2B%3Ax"


def test_search_query_keys_follow_field_marker():
    assert search_query_keys(QueryChangeOptions(query="is:open")) == {"q"}
    assert search_query_keys(FilesOptions(query="src/")) == frozenset()
    assert search_query_keys({"q": "is:open"}) == frozenset()


def test_encode_query_escapes_other_params():
    assert encode_query({"r": "(arch|benchmarks)", "n": 2}) == (
        "n=2&r=%28arch%7Cbenchmarks%29"
    )


def test_encode_query_repeats_list_values_in_order():
    assert encode_query({"o": ["LABELS", "DETAILED_ACCOUNTS"]}) == (
        "o=LABELS&o=DETAILED_ACCOUNTS"
    )


def test_encode_query_omits_zero_values():
    assert encode_query({"n": 0, "d": False, "p": "", "m": None}) == ""
    assert encode_query({"d": True}) == "d=true"


def test_options_to_params_uses_wire_names():
    params = options_to_params(ProjectOptions(limit=2, regex="(arch|benchmarks)"))
    assert params == {"n": 2, "r": "(arch|benchmarks)"}


def test_options_to_params_rejects_other_types():
    with pytest.raises(TypeError):
        options_to_params(["n", 2])


def test_append_query_without_options_is_identity():
    assert append_query("https://example.com/changes/", None) == (
        "https://example.com/changes/"
    )
    assert append_query("https://example.com/changes/", QueryChangeOptions()) == (
        "https://example.com/changes/"
    )


def test_append_query_with_change_options():
    url = append_query(
        "https://example.com/changes/",
        QueryChangeOptions(query="status:open+is:watched", limit=2),
    )
    assert url == "https://example.com/changes/?n=2&q=status:open+is:watched"


def test_append_query_escapes_file_filter():
    url = append_query(
        "https://example.com/changes/1/revisions/current/files/",
        FilesOptions(query="c++/x y"),
    )
    assert url == (
        "https://example.com/changes/1/revisions/current/files/?q=c%2B%2B%2Fx+y"
    )
