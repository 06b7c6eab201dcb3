from ctk.PARSERS.compose_parser import ComposeParser, end_marker, start_marker

COMPOSE = """services:
  # -- postgres --
  postgres:
    image: postgres:16
  # // postgres //
  # -- redis --
  redis:
    image: redis:7
  # // redis //
volumes:
  postgres_data:
"""


def test_parse_segments():
    segments = ComposeParser().parse(COMPOSE)

    assert [s.identifier for s in segments] == [None, "postgres", "redis", None]
    assert segments[0].body == "services:\n"
    assert segments[1].start_marker == "  # -- postgres --\n"
    assert segments[1].body == "  postgres:\n    image: postgres:16\n"
    assert segments[1].end_marker == "  # // postgres //\n"
    assert segments[3].body == "volumes:\n  postgres_data:\n"


def test_parse_preserves_text():
    segments = ComposeParser().parse(COMPOSE)
    assert "".join(s.text for s in segments) == COMPOSE


def test_render_strips_markers():
    parser = ComposeParser()
    rendered = parser.render(parser.parse(COMPOSE))
    assert "# --" not in rendered
    assert "# //" not in rendered
    assert "  redis:\n    image: redis:7\n" in rendered


def test_render_removes_regions():
    parser = ComposeParser()
    rendered = parser.render(parser.parse(COMPOSE), remove={"redis"})
    assert rendered == (
        "services:\n"
        "  postgres:\n"
        "    image: postgres:16\n"
        "volumes:\n"
        "  postgres_data:\n"
    )


def test_end_marker_is_nearest_with_same_identifier():
    content = (
        "  # -- a --\n"
        "  a: 1\n"
        "  # // a //\n"
        "  keep: 1\n"
        "  # -- a --\n"
        "  a: 2\n"
        "  # // a //\n"
    )
    parser = ComposeParser()
    segments = parser.parse(content)
    assert [s.identifier for s in segments] == ["a", None, "a"]
    assert parser.render(segments, remove={"a"}) == "  keep: 1\n"


def test_other_end_marker_does_not_close_region():
    content = "  # -- a --\n  x: 1\n  # // b //\n  y: 2\n  # // a //\nrest\n"
    segments = ComposeParser().parse(content)
    assert segments[0].identifier == "a"
    assert segments[0].body == "  x: 1\n  # // b //\n  y: 2\n"
    assert segments[1].body == "rest\n"


def test_markers_inside_a_kept_region_are_only_stripped():
    content = "  # -- a --\n  a: 1\n  # -- b --\n  b: 1\n  # // b //\n  # // a //\n"
    parser = ComposeParser()
    segments = parser.parse(content)
    assert [s.identifier for s in segments] == ["a"]
    assert parser.render(segments, remove={"b"}) == "  a: 1\n  b: 1\n"


def test_unterminated_start_marker_is_text():
    content = "  # -- a --\n  x: 1\nrest\n"
    parser = ComposeParser()
    segments = parser.parse(content)
    assert len(segments) == 1
    assert segments[0].identifier is None
    assert parser.render(segments, remove={"a"}) == "  x: 1\nrest\n"


def test_marker_must_be_whole_line():
    content = "  image: foo  # -- a --\n    # -- a --\n"
    parser = ComposeParser()
    assert parser.render(parser.parse(content)) == content


def test_marker_without_trailing_newline():
    content = "top\n  # -- a --\n  a: 1\n  # // a //"
    parser = ComposeParser()
    assert parser.render(parser.parse(content), remove={"a"}) == "top\n"
    assert parser.render(parser.parse(content)) == "top\n  a: 1\n"


def test_crlf_line_endings():
    content = "top\r\n  # -- a --\r\n  a: 1\r\n  # // a //\r\nend\r\n"
    parser = ComposeParser()
    assert parser.render(parser.parse(content), remove={"a"}) == "top\r\nend\r\n"
    assert parser.render(parser.parse(content)) == "top\r\n  a: 1\r\nend\r\n"


def test_empty_content():
    parser = ComposeParser()
    assert parser.parse("") == []
    assert parser.render([]) == ""


def test_marker_helpers():
    assert start_marker("redis") == "  # -- redis --"
    assert end_marker("redis") == "  # // redis //"
