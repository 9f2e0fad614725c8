import pytest

from sitedeploy.output import escapes_prefix, join_path


@pytest.mark.parametrize(
    ("parts", "expected"),
    [
        (("", "index.html"), "index.html"),
        (("v2", "css/main.css"), "v2/css/main.css"),
        (("/123456/", "", "v2", "index.html"), "123456/v2/index.html"),
        (("a//b", "/c"), "a/b/c"),
        (("a", "./b", "../c"), "a/c"),
        (("", ".well-known/security.txt"), ".well-known/security.txt"),
        (("", ""), ""),
        (("/",), ""),
    ],
)
def test_join_path(parts, expected):
    assert join_path(*parts) == expected


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("index.html", False),
        ("a/../b.html", False),
        ("/abs/key", False),
        ("..data/x", False),
        ("..", True),
        ("../x", True),
        ("a/../../x", True),
        ("/../x", True),
    ],
)
def test_escapes_prefix(key, expected):
    assert escapes_prefix(key) is expected
