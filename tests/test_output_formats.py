from views.browse.output_formats import (
    current_action_contexts,
    output_format_list,
    output_format_url,
)


def test_no_contexts_gives_none():
    assert output_format_list([]) is None
    assert output_format_list(None) is None


def test_contexts_are_sorted_and_unique():
    assert current_action_contexts(["rss2", "json", "json", " ", ""]) == ["json", "rss2"]


def test_unordered_list():
    html = output_format_list(["rss2", "json"], query={"search": "box"}, base_url="/items")
    assert html == (
        '<ul id="output-format-list">'
        '<li><a href="/items?search=box&amp;output=json">json</a></li>'
        '<li><a href="/items?search=box&amp;output=rss2">rss2</a></li>'
        "</ul>"
    )


def test_delimited_has_no_trailing_delimiter():
    html = output_format_list(["json", "rss2", "omeka-xml"], as_list=False)
    assert html.startswith('<p id="output-format-list">')
    assert html.endswith("</a></p>")
    assert html.count(" | ") == 2


def test_existing_output_param_is_replaced():
    url = output_format_url("json", query={"output": "rss2", "page": "2"})
    assert url == "?output=json&page=2"


def test_delimiter_is_escaped():
    html = output_format_list(["a", "b"], as_list=False, delimiter=" <br> ")
    assert "&lt;br&gt;" in html
