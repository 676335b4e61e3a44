import io

from fullfetch import info
from fullfetch.config import Config
from fullfetch.render import color_code, print_report, render_sections


def _config(order, switches, colors=None):
    return Config(
        scheme="s",
        schemes={"s": switches},
        order="o",
        orders={"o": order},
        color_scheme="c",
        color_schemes={"c": colors or {}},
        art="a",
        arts={"a": ["line one", "line two"]},
    )


def test_color_code_known_names():
    assert color_code("Reset") == "\033[0m"
    assert color_code("Orange") == "\033[38;5;208m"


def test_color_code_unknown_name_is_empty():
    assert color_code("NoSuchColour") == ""
    assert color_code("") == ""


def test_sections_follow_order_and_colors(monkeypatch):
    monkeypatch.setenv("LANG", "en_US.UTF-8")
    cfg = _config(
        ["locale", "art", "credits"],
        {"locale": True, "art": True, "credits": True},
        {"credits": "Red", "locale": "Blue"},
    )
    parts = list(render_sections(cfg))
    reset = color_code("Reset")
    assert parts == [
        info.render_locale(color_code("Blue"), reset),
        info.render_art(cfg),
        info.render_credits(color_code("Red"), reset),
    ]


def test_disabled_and_unknown_sections_are_skipped():
    cfg = _config(
        ["credits", "art", "mystery"],
        {"credits": False, "art": True, "mystery": True},
    )
    assert list(render_sections(cfg)) == [info.render_art(cfg)]


def test_section_missing_from_scheme_is_skipped():
    cfg = _config(["art", "credits"], {"art": True})
    assert list(render_sections(cfg)) == [info.render_art(cfg)]


def test_missing_color_name_gives_plain_text():
    cfg = _config(["credits"], {"credits": True})
    assert list(render_sections(cfg)) == [info.render_credits("", color_code("Reset"))]


def test_empty_config_renders_nothing():
    assert list(render_sections(Config())) == []


def test_print_report_writes_all_sections(monkeypatch):
    monkeypatch.setenv("LANG", "C")
    cfg = _config(["art", "locale", "credits"], {"art": True, "locale": True, "credits": True})
    stream = io.StringIO()
    print_report(cfg, stream)
    assert stream.getvalue() == "".join(render_sections(cfg))
    assert stream.getvalue().startswith("line one\nline two\n\n")