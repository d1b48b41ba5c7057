import pytest

from flatini import EncodingError, Entry, files

TEXT = """# 設定
[ユーザー]
名前 = 山田太郎
住所 = 東京都千代田区丸の内一丁目
"""

ENTRIES = [
    Entry("ユーザー", "名前", "山田太郎"),
    Entry("ユーザー", "住所", "東京都千代田区丸の内一丁目"),
]


def test_load_path_detects_utf8(tmp_path):
    path = tmp_path / "config.ini"
    path.write_bytes(TEXT.encode("utf-8"))

    assert files.detect_path_encoding(path) == "utf-8"
    assert files.load_path(path) == ENTRIES


def test_load_path_explicit_encoding(tmp_path):
    path = tmp_path / "config.ini"
    path.write_bytes(TEXT.encode("shift_jis"))

    assert files.load_path(str(path), encoding="shift_jis") == ENTRIES


def test_load_path_empty(tmp_path):
    path = tmp_path / "empty.ini"
    path.write_bytes(b"")

    assert files.load_path(path) == []


def test_load_path_undetected(tmp_path, monkeypatch):
    path = tmp_path / "config.ini"
    path.write_bytes(b"a = 1\n")

    monkeypatch.setattr(files, "detect_encoding", lambda f: None)

    with pytest.raises(EncodingError):
        files.load_path(path)


def test_save_path(tmp_path):
    path = tmp_path / "config.ini"
    files.save_path(ENTRIES, path, encoding="shift_jis")

    assert path.read_bytes() == "[ユーザー]\n名前 = 山田太郎\n住所 = 東京都千代田区丸の内一丁目\n".encode(
        "shift_jis"
    )
    assert files.load_path(path, encoding="shift_jis") == ENTRIES
