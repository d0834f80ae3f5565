import pytest

from czivalidate.utils import get_file_size, get_version_number, icasecmp, trim


@pytest.mark.parametrize(
    "left,right",
    [("text", "TEXT"), ("Json", "jSON"), ("", ""), ("default", "Default")],
)
def test_icasecmp_equal(left, right):
    assert icasecmp(left, right) is True


@pytest.mark.parametrize(
    "left,right",
    [("text", "texts"), ("json", "xml"), ("a", "")],
)
def test_icasecmp_different(left, right):
    assert icasecmp(left, right) is False


def test_trim_default_whitespace():
    assert trim("  \tyes \t ") == "yes"


def test_trim_keeps_inner_spaces():
    assert trim("  a b  ") == "a b"


def test_trim_only_whitespace():
    assert trim(" \t \t") == ""


def test_trim_does_not_strip_newline_by_default():
    assert trim(" x\n") == "x\n"


def test_trim_custom_set():
    assert trim("--abc-", "-") == "abc"


def test_version_number():
    assert get_version_number() == "0.6.5"


def test_file_size(tmp_path):
    path = tmp_path / "data.bin"
    content = b"abcdefghij" * 7
    path.write_bytes(content)
    assert get_file_size(path) == len(content)


def test_file_size_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_file_size(tmp_path / "missing.czi")