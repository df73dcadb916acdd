import strsplit


def test_smoke():
    tokens = list(strsplit.StrSplit("apple,banana,,mango", strsplit.CharDelimiter(",")))
    assert tokens == ["apple", "banana", "mango"]
    assert strsplit.until_char("hello world", "o") == "hell"
    for name in strsplit.__all__:
        assert hasattr(strsplit, name), name
