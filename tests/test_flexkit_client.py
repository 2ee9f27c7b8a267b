import pytest

from plasso.integrations.clients.real_http.flexkit import FlexkitClient
from plasso.integrations.contracts.flexkit import (
    CreditCardRequest,
    DataItem,
    LoginRequest,
    PaymentRequest,
    Product,
    SettingsRequest,
    SubscriptionRequest,
)
from plasso.integrations.contracts.interfaces import Member
from plasso.integrations.policy.response_wrappers import PlassoAPIError, PlassoResponseError


@pytest.fixture
def client(config, http_client):
    return FlexkitClient(config=config, http_client=http_client)


def _login(client, transport, token="tok-1"):
    transport.reply(200, {"token": token})
    return client.login(LoginRequest(public_key="pk_test", email="mike+1@plasso.com", password="password"))


def test_login_posts_credentials_and_returns_member(client, transport):
    member = _login(client, transport)

    assert str(transport.last.url) == "https://plasso.test/api/service/login"
    assert transport.last_json() == {
        "public_key": "pk_test",
        "email": "mike+1@plasso.com",
        "password": "password",
    }
    assert member == Member(public_key="pk_test", token="tok-1")
    assert member.client is client


def test_login_rejected_raises_api_error(client, transport):
    transport.reply(401, b'{"error":"bad password"}')

    with pytest.raises(PlassoAPIError) as excinfo:
        client.login(LoginRequest(public_key="pk", email="a@b.c", password="nope"))

    assert "401" in str(excinfo.value)
    assert "bad password" in str(excinfo.value)


def test_login_with_unparseable_reply_raises_response_error(client, transport):
    transport.reply(200, b"<html>oops</html>")

    with pytest.raises(PlassoResponseError):
        client.login(LoginRequest(public_key="pk", email="a@b.c", password="pw"))


def test_login_reply_without_token_raises_response_error(client, transport):
    transport.reply(200, {"user": "x"})

    with pytest.raises(PlassoResponseError):
        client.login(LoginRequest(public_key="pk", email="a@b.c", password="pw"))


def test_create_payment_sends_full_payload(client, transport):
    request = PaymentRequest(
        public_key="pk",
        token="tok_js",
        products=[Product(id="prod_1", qty="2"), Product(id="prod_2", qty="1", amount="9.99")],
        data_fields=[DataItem(id="size", value="L")],
        coupon="SAVE10",
        email="a@b.c",
        name="Ada",
        shipping_city="Austin",
    )

    assert client.create_payment(request) is None

    assert str(transport.last.url) == "https://plasso.test/api/payments"
    body = transport.last_json()
    assert body["products"] == [
        {"id": "prod_1", "qty": "2", "amount": ""},
        {"id": "prod_2", "qty": "1", "amount": "9.99"},
    ]
    assert body["data_fields"] == [{"id": "size", "value": "L"}]
    assert body["coupon"] == "SAVE10"
    assert body["shipping_city"] == "Austin"
    assert body["billing_zip"] == ""
    assert set(body) == {
        "public_key", "token", "products", "billing_address", "billing_city", "billing_state",
        "billing_zip", "billing_country", "shipping_name", "shipping_address", "shipping_city",
        "shipping_state", "shipping_zip", "shipping_country", "shipping_options", "data_fields",
        "coupon", "email", "name",
    }


def test_create_subscription_marks_subscription_for_space(client, transport):
    transport.reply(200, {"token": "tok-new"})

    member = client.create_subscription(
        SubscriptionRequest(public_key="pk", plan="plan_gold", email="a@b.c", name="Ada", password="pw", token="tok_js")
    )

    body = transport.last_json()
    assert str(transport.last.url) == "https://plasso.test/api/subscriptions"
    assert body["subscription_for"] == "space"
    assert body["plan"] == "plan_gold"
    assert body["password"] == "pw"
    assert member.token == "tok-new"
    assert member.public_key == "pk"


def test_subscription_for_cannot_be_set_by_caller():
    payload = SubscriptionRequest(public_key="pk", subscription_for="user").to_payload()

    assert "subscription_for" not in payload


def test_update_settings_adds_member_token(client, transport):
    member = _login(client, transport, token="tok-7")

    member.update_settings(SettingsRequest(email="new@b.c", name="New", shipping_zip="78701"))

    assert transport.last.url.path == "/api/services/user"
    assert transport.last.url.params["action"] == "settings"
    body = transport.last_json()
    assert body["pltoken"] == "tok-7"
    assert body["email"] == "new@b.c"
    assert body["shipping_zip"] == "78701"
    assert "billing_zip" not in body


def test_update_credit_card_uses_wire_names(client, transport):
    member = _login(client, transport, token="tok-8")

    member.update_credit_card(CreditCardRequest(last4="4242", type="Visa", plan_id=12, token="src_123"))

    assert transport.last.url.params["action"] == "cc"
    assert transport.last_json() == {
        "cc_last_4": "4242",
        "cc_type": "Visa",
        "plan": 12,
        "token": "src_123",
        "pltoken": "tok-8",
    }


def test_credit_card_request_accepts_wire_names():
    request = CreditCardRequest(cc_last_4="1111", cc_type="Amex", plan=3)

    assert request.last4 == "1111"
    assert request.plan_id == 3


def test_get_data_queries_graphql_with_token_variable(client, transport):
    member = _login(client, transport, token="tok-9")
    transport.reply(200, {
        "data": {
            "member": {
                "id": "mem_1",
                "email": "a@b.c",
                "name": "Ada",
                "billingCountry": "US",
                "shippingName": "Ada L",
                "dataFields": [{"id": "size", "value": "L"}],
                "plans": ["plan_gold"],
            }
        }
    })

    data = member.get_data()

    assert str(transport.last.url) == "https://plasso.test/graphql"
    body = transport.last_json()
    assert body["variables"] == {"token": "tok-9"}
    assert "tok-9" not in body["query"]
    assert data.id == "mem_1"
    assert data.billing_country == "US"
    assert data.shipping_name == "Ada L"
    assert data.data_fields[0].value == "L"
    assert data.plans == ["plan_gold"]
    assert data.shipping_city == ""


def test_get_data_graphql_errors_raise(client, transport):
    member = _login(client, transport)
    transport.reply(200, {"data": {"member": None}, "errors": [{"message": "invalid token"}]})

    with pytest.raises(PlassoResponseError, match="invalid token"):
        member.get_data()


def test_delete_sends_token_and_closes_member(client, transport):
    member = _login(client, transport, token="tok-d")

    member.delete()

    assert transport.last.method == "DELETE"
    assert transport.last.url.path == "/api/service/user"
    assert transport.last_json() == {"token": "tok-d"}
    with pytest.raises(ValueError):
        member.get_data()


def test_logout_sends_token_and_closes_member(client, transport):
    member = _login(client, transport, token="tok-l")

    member.logout()

    assert transport.last.method == "POST"
    assert transport.last.url.path == "/api/service/logout"
    assert transport.last_json() == {"token": "tok-l"}
    with pytest.raises(ValueError):
        member.logout()


def test_failed_logout_keeps_member_usable(client, transport):
    member = _login(client, transport)
    transport.reply(500, b"down")

    with pytest.raises(PlassoAPIError):
        member.logout()

    assert member.closed is False


def test_unbound_member_refuses_calls():
    with pytest.raises(ValueError):
        Member(public_key="pk", token="t").get_data()


def test_pltoken_cannot_be_set_by_caller(client, transport):
    assert "pltoken" not in SettingsRequest(pltoken="forged").to_payload()
    assert "pltoken" not in CreditCardRequest(pltoken="forged").to_payload()

    member = _login(client, transport, token="tok-real")
    member.update_settings(SettingsRequest(pltoken="forged"))

    assert transport.last_json()["pltoken"] == "tok-real"


def test_flexkit_calls_use_flexkit_timeout(client, transport):
    _login(client, transport)

    assert transport.last.extensions["timeout"]["read"] == 5.0
