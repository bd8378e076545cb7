import sys

from stkit.externalpipe import ScreenLine, external_pipe, screen_text


def test_trailing_blanks_trimmed_to_one():
    lines = [ScreenLine("ab  "), ScreenLine("cd")]
    assert screen_text(lines) == "ab \ncd\n"


def test_wrapped_lines_joined():
    lines = [ScreenLine("abcd", wrapped=True), ScreenLine("ef")]
    assert screen_text(lines) == "abcdef\n"


def test_last_line_wrapped_gets_newline():
    assert screen_text([ScreenLine("ab", wrapped=True)]) == "ab\n"


def test_blank_lines_of_any_width_agree():
    assert screen_text([ScreenLine("    ")]) == screen_text([ScreenLine(" ")])


def test_zero_width_line_stops():
    lines = [ScreenLine("ab"), ScreenLine(""), ScreenLine("cd")]
    assert screen_text(lines) == screen_text([ScreenLine("ab")])


def test_length_property():
    assert ScreenLine("ab  ").length == 2
    assert ScreenLine("ab  ", wrapped=True).length == len("ab  ")


def test_external_pipe_writes_screen(tmp_path):
    out = tmp_path / "out.bin"
    script = "import sys; open(sys.argv[1], 'wb').write(sys.stdin.buffer.read())"
    lines = [ScreenLine("hello  "), ScreenLine("wörld", wrapped=True), ScreenLine("!")]
    process = external_pipe([sys.executable, "-c", script, str(out)], lines)
    assert process.wait(timeout=30) == 0
    assert out.read_bytes() == screen_text(lines).encode("utf-8")


def test_external_pipe_missing_program(tmp_path):
    missing = str(tmp_path / "no-such-program")
    assert external_pipe([missing], [ScreenLine("x")]) is None