import pytest

from comlayout.config import Config, ConfigItem, str_to_int


def _loaded(text):
    config = Config()
    config.load(text)
    return config


def _triples(config):
    return [(item.key, item.value, item.comment) for item in config]


def test_simple_settings():
    config = _loaded("a = 1\nb = hello\n")
    assert config.get("a").value == "1"
    assert config.get("a").as_int() == 1
    assert config.get("b").value == "hello"
    assert config.get("missing") is None


def test_crlf_lines():
    config = _loaded("a = 1\r\nb = 2\r\n")
    assert [(i.key, i.value) for i in config] == [("a", "1"), ("b", "2")]


def test_quoted_value_with_comment():
    config = _loaded('title = "My App" ; note\n')
    item = config.get("title")
    assert item.value == "My App"
    assert item.comment == "; note"


def test_escaped_quote_in_quoted_value():
    config = _loaded('k = "say \\"hi\\""\n')
    assert config.get("k").value == 'say "hi"'


def test_comment_and_blank_lines_are_kept():
    config = _loaded("# hello\n\nx = 1\n")
    assert _triples(config) == [("", "", "# hello"), ("", "", ""), ("x", "1", "")]


def test_line_without_equals_is_dropped():
    config = _loaded("junk\nx = 1\n")
    assert [item.key for item in config] == ["x"]


def test_unterminated_quote_is_dropped():
    config = _loaded('a = "open\nb = 2\n')
    assert config.get("a") is None
    assert config.get("b").value == "2"


def test_empty_value_with_comment():
    item = _loaded("k = ;note\n").get("k")
    assert (item.value, item.comment) == ("", ";note")


def test_line_continuation():
    assert _loaded("k = ab\\\ncd\n").get("k").value == "abcd"


def test_backslash_kept():
    assert _loaded("path = C:\\dir\n").get("path").value == "C:\\dir"


def test_trailing_words_after_value_are_dropped():
    assert _loaded("a = b c\n").get("a").value == "b"


def test_load_empty_raises():
    with pytest.raises(ValueError):
        Config().load("")


def test_set_values_and_dumps():
    config = Config()
    config.set("gui.topmost", True)
    config.set("comm.config.parity", 2)
    config.set("app.title", "My App")
    assert config.dumps() == (
        "gui.topmost = true\r\n"
        "comm.config.parity = 2\r\n"
        'app.title = "My App"\r\n'
    )


def test_dumps_comment_after_setting():
    assert _loaded("k = v ;c\n").dumps() == "k = v\t;c\r\n"


def test_set_existing_updates_in_place():
    config = _loaded("a = 1\nb = 2\n")
    config.set("a", False)
    assert [(i.key, i.value) for i in config] == [("a", "false"), ("b", "2")]
    assert config.get("a").as_bool() is False


def test_round_trip():
    text = '# header\n\nname = "two words" ;c\nn = 5\n'
    first = _loaded(text)
    second = _loaded(first.dumps())
    assert _triples(first) == _triples(second)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -7x", -7), ("abc", 0), ("", 0), ("+3", 3)],
)
def test_str_to_int(text, expected):
    assert str_to_int(text) == expected


def test_item_bool_and_set():
    item = ConfigItem("k", "true")
    assert item.as_bool() is True
    item.set("True")
    assert item.as_bool() is False
    item.set(12)
    assert item.as_int() == 12


def test_save_and_load_file(tmp_path):
    path = tmp_path / "com.ini"
    config = Config()
    config.set("comm.autosend.enable", True)
    config.set("comm.autosend.interval", 1000)
    config.save_file(path)

    loaded = Config()
    loaded.load_file(path)
    assert loaded.get("comm.autosend.enable").as_bool() is True
    assert loaded.get("comm.autosend.interval").as_int() == 1000

    loaded.set("comm.autosend.interval", 50)
    loaded.save_file()
    again = Config()
    again.load_file(path)
    assert again.get("comm.autosend.interval").as_int() == 50


def test_load_file_errors(tmp_path):
    empty = tmp_path / "empty.ini"
    empty.write_bytes(b"")
    with pytest.raises(ValueError):
        Config().load_file(empty)

    large = tmp_path / "large.ini"
    large.write_bytes(b"#" * ((1 << 20) + 1))
    with pytest.raises(ValueError):
        Config().load_file(large)

    with pytest.raises(FileNotFoundError):
        Config().load_file(tmp_path / "missing.ini")


def test_save_without_path_raises():
    with pytest.raises(ValueError):
        Config().save_file()