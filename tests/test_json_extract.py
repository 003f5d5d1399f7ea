from resume_signal_ai.utils.json_extract import extract_json_span, parse_json_array, parse_json_object


def test_object_wrapped_in_prose():
    text = 'Sure! Here is the result:\n{"soft": ["Leadership"], "tools": []}\nLet me know.'
    assert parse_json_object(text) == {"soft": ["Leadership"], "tools": []}


def test_code_fence_is_tolerated():
    text = '```json\n{"name": "Jane"}\n```'
    assert parse_json_object(text) == {"name": "Jane"}


def test_braces_inside_strings_do_not_break_balance():
    text = 'x {"summary": "uses {curly} braces and \\"quotes\\"", "n": 1} y'
    assert parse_json_object(text) == {"summary": 'uses {curly} braces and "quotes"', "n": 1}


def test_later_span_used_when_first_does_not_decode():
    text = "{not json} then {\"ok\": true}"
    assert extract_json_span(text) == '{"ok": true}'
    assert parse_json_object(text) == {"ok": True}


def test_unbalanced_or_missing_returns_none():
    assert parse_json_object('{"a": 1') is None
    assert parse_json_object("no json here") is None
    assert parse_json_object(None) is None
    assert parse_json_object(42) is None


def test_dict_and_list_pass_through():
    payload = {"a": [1]}
    assert parse_json_object(payload) is payload
    items = [{"company": "Acme"}]
    assert parse_json_array(items) is items


def test_array_from_text_and_wrapper_object():
    assert parse_json_array('Result: [{"degree": "BSc"}]') == [{"degree": "BSc"}]
    assert parse_json_array({"experience": [{"company": "Acme"}]}) == [{"company": "Acme"}]
    assert parse_json_array('{"projects": [{"name": "Bot"}]}') == [{"name": "Bot"}]


def test_array_ambiguous_wrapper_is_rejected():
    assert parse_json_array({"a": [], "b": []}) is None
    assert parse_json_array("nothing") is None
