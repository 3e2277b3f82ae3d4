import pytest

from jigglydrum.ctags_dlist import (
    MAX_PATH,
    DependencyListError,
    header_paths,
    main,
    write_header_list,
)

SAMPLE = "main.o: src/main.cpp inc/me.h \\\n /usr/include/SDL2/SDL.h\n"


def test_header_paths_from_sample():
    assert header_paths(SAMPLE) == ["inc/me.h", "/usr/include/SDL2/SDL.h"]


def test_short_tokens_are_kept():
    assert header_paths("cpp o: a.h\n") == ["cpp", "o:", "a.h"]


def test_tabs_are_not_separators():
    assert header_paths("a.h\tb.h\n") == ["a.h\tb.h"]


def test_missing_final_separator_is_error():
    with pytest.raises(DependencyListError):
        header_paths("a.h b.h")


def test_too_long_path_is_error():
    with pytest.raises(DependencyListError):
        header_paths("x" * MAX_PATH + "\n")


def test_longest_allowed_path():
    token = "x" * (MAX_PATH - 1)
    assert header_paths(token + "\n") == [token]


def test_write_header_list(tmp_path):
    dep = tmp_path / "main.d"
    dep.write_text(SAMPLE)
    out = tmp_path / "headers.txt"
    write_header_list(dep, out)
    assert out.read_text().splitlines() == header_paths(SAMPLE)


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "absent.d")]) == 1
    assert "Cannot open dependencies file" in capsys.readouterr().err


def test_main_writes_headers_txt(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "main.d").write_text(SAMPLE)
    assert main(["main.d"]) == 0
    assert (tmp_path / "headers.txt").read_text() == "inc/me.h\n/usr/include/SDL2/SDL.h\n"