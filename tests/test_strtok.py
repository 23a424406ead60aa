from crusty.strtok import strtok


def test_it_works():
    hello, rest = strtok("hello world", " ")
    assert hello == "hello"
    assert rest == "world"


def test_no_delimiter_consumes_everything():
    assert strtok("hello", " ") == ("hello", "")


def test_repeated_tokens():
    rest = "a:b:c"
    tokens = []
    while rest:
        token, rest = strtok(rest, ":")
        tokens.append(token)
    assert tokens == ["a", "b", "c"]


def test_leading_delimiter_gives_empty_token():
    assert strtok(" world", " ") == ("", "world")