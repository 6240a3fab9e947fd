import pytest

from kuekit.text import replace_space_and_dot, sort_to_map


@pytest.mark.parametrize(
    "text, want",
    [
        ("nama,-posisi", {"nama": "ASC", "posisi": "DESC"}),
        ("-nama,-posisi", {"nama": "DESC", "posisi": "DESC"}),
        ("nama,posisi", {"nama": "ASC", "posisi": "ASC"}),
        ("", {}),
        ("nama", {"nama": "ASC"}),
        ("-nama", {"nama": "DESC"}),
        ("nama,created-at", {"nama": "ASC", "created-at": "ASC"}),
        ("nama,-created at", {"nama": "ASC", "created at": "DESC"}),
        ("nama,  -created_at", {"nama": "ASC", "created_at": "DESC"}),
        (",nama", {}),
    ],
)
def test_sort_to_map(text, want):
    assert sort_to_map(text) == want


def test_sort_to_map_empty_field():
    with pytest.raises(ValueError):
        sort_to_map("nama,,posisi")


@pytest.mark.parametrize(
    "text, replacement, want",
    [
        ("Hello World.Txt", "_", "hello_world_txt"),
        ("Kue Lapis", "-", "kue-lapis"),
        ("NO.CHANGE", "", "nochange"),
        ("", "_", ""),
    ],
)
def test_replace_space_and_dot(text, replacement, want):
    assert replace_space_and_dot(text, replacement) == want