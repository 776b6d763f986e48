import pytest

from task_manager.utils.slug import slugify


@pytest.mark.parametrize(
    "text, expected",
    [
        ("My Project", "my-project"),
        ("  Write report  ", "write-report"),
        ("Q3 -- planning!!", "q3-planning"),
        ("already-a-slug", "already-a-slug"),
        ("Crème brûlée", "creme-brulee"),
        ("__init__", "init"),
        ("!!!", ""),
        ("", ""),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    assert slugify(text) == expected


@pytest.mark.parametrize("text", ["My Project", " Ünïcode  Tïtle ", "a//b\\c", "Setup", "x_y z"])
def test_slugify_is_idempotent(text: str) -> None:
    once = slugify(text)
    assert slugify(once) == once
    assert slugify(text) == once
