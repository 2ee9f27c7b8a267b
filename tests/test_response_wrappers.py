import pytest

from plasso.integrations.policy.response_wrappers import (
    PlassoAPIError,
    PlassoResponseError,
    normalize_member_data_response,
    normalize_session_response,
    normalize_token_response,
)


def test_token_response():
    assert normalize_token_response(b'{"token": "abc", "extra": 1}') == "abc"


@pytest.mark.parametrize("body", [b"", b"null", b"[1,2]", b'{"token": null}'])
def test_bad_token_responses_raise(body):
    with pytest.raises(PlassoResponseError):
        normalize_token_response(body)


def test_session_response_defaults_missing_space():
    session = normalize_session_response(b'{"data": {"member": {"id": "m1"}}}', token="t")

    assert session.logged_in is True
    assert session.plan_id == 0
    assert session.space.logout_url == ""


def test_member_data_keeps_payload_on_error():
    with pytest.raises(PlassoResponseError) as excinfo:
        normalize_member_data_response(b'{"errors": [{"message": "expired"}]}')

    assert excinfo.value.payload == {"errors": [{"message": "expired"}]}


def test_api_error_text_decodes_body():
    err = PlassoAPIError("GET", 404, "https://plasso.test/x", "nicht gefunden –".encode("utf-8"))

    assert err.text == "nicht gefunden –"
    assert str(err) == "GET 404 https://plasso.test/x nicht gefunden –"
