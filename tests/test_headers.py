from quickfetch.headers import Header, Headers


def _sample():
    headers = Headers()
    headers.append("Content-Type", "text/html")
    headers.append("X-Trace", "abc")
    return headers


def test_append_keeps_order():
    headers = _sample()
    assert len(headers) == 2
    assert list(headers) == [Header("Content-Type", "text/html"), Header("X-Trace", "abc")]


def test_append_allows_duplicates():
    headers = Headers()
    headers.append("A", "1")
    headers.append("A", "2")
    assert len(headers) == 2
    assert headers.get("A") == "1"


def test_set_replaces_existing_value():
    headers = _sample()
    headers.set("X-Trace", "def")
    assert len(headers) == 2
    assert headers.get("X-Trace") == "def"
    assert headers.key_at(1) == "X-Trace"


def test_set_appends_new_key():
    headers = _sample()
    headers.set("Accept", "*/*")
    assert len(headers) == 3
    assert headers.key_at(2) == "Accept"
    assert headers.value_at(2) == "*/*"


def test_set_is_case_sensitive():
    headers = _sample()
    headers.set("content-type", "application/json")
    assert len(headers) == 3
    assert headers.get("Content-Type") == "text/html"


def test_index_access_out_of_range():
    headers = _sample()
    assert headers.key_at(2) is None
    assert headers.value_at(5) is None
    assert headers.key_at(-1) is None


def test_get_exact_match_only():
    headers = _sample()
    assert headers.get("Content-Type") == "text/html"
    assert headers.get("content-type") is None


def test_get_sanitized():
    headers = _sample()
    assert headers.get_sanitized("contenttype") == "text/html"
    assert headers.get_sanitized("XTRACE") == "abc"
    assert headers.get_sanitized("content-type") is None
    assert headers.get_sanitized("missing") is None


def test_empty_headers():
    headers = Headers()
    assert len(headers) == 0
    assert headers.get("A") is None
    assert headers.key_at(0) is None