import base64

import pytest
import requests

from idm_client.net import (
    NO_AUTHENTICATOR,
    PROXY_AUTHORIZATION,
    BasicProxyAuthenticator,
    ProxyCredentials,
    basic_credentials,
    construct_authenticator,
)


def _challenge(headers=None):
    request = requests.Request("GET", "https://tenant.example.com/api/v2/rules", headers=headers).prepare()
    response = requests.Response()
    response.status_code = 407
    response.request = request
    return response


def test_no_authenticator_declines():
    assert NO_AUTHENTICATOR.authenticate(_challenge()) is None


def test_basic_authenticator_adds_header_to_copy():
    challenge = _challenge()
    retry = BasicProxyAuthenticator(ProxyCredentials("test", "pass")).authenticate(challenge)

    assert retry is not challenge.request
    assert retry.url == challenge.request.url
    assert retry.headers[PROXY_AUTHORIZATION] == "Basic dGVzdDpwYXNz"
    assert PROXY_AUTHORIZATION not in challenge.request.headers


def test_basic_authenticator_stops_when_header_already_sent():
    challenge = _challenge(headers={PROXY_AUTHORIZATION: "Basic b2xkOmNyZWRz"})
    assert BasicProxyAuthenticator(ProxyCredentials("test", "pass")).authenticate(challenge) is None


def test_construct_authenticator_accepts_tuple():
    authenticator = construct_authenticator(("test", "pass"))
    assert authenticator.credentials == ProxyCredentials("test", "pass")


def test_construct_authenticator_requires_credentials():
    with pytest.raises(ValueError, match="'credentials' cannot be null!"):
        construct_authenticator(None)


def test_repr_hides_password():
    assert "pass" not in repr(BasicProxyAuthenticator(ProxyCredentials("test", "pass")))


def test_basic_credentials_encodes_utf8():
    expected = "Basic " + base64.b64encode("zoë:pa:ss".encode("utf-8")).decode("ascii")
    assert basic_credentials(ProxyCredentials("zoë", "pa:ss")) == expected


def test_basic_credentials_header_value():
    assert basic_credentials(ProxyCredentials("test", "pass")) == "Basic dGVzdDpwYXNz"
