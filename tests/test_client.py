import requests

from str_increment.client import APIError, APIResponse, SequenceClient


class FakeResponse:
    def __init__(self, status_code, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


def test_publish_sends_count_and_values(monkeypatch):
    client = SequenceClient("http://h:1/ids")
    sent = {}

    def fake_post(url, json=None, timeout=None):
        sent.update(url=url, json=json, timeout=timeout)
        return FakeResponse(201, {"accepted": len(json["values"])})

    monkeypatch.setattr(client.session, "post", fake_post)
    resp = client.publish(["a8", "a9"])

    assert sent["url"] == "http://h:1/ids"
    assert sent["json"] == {"count": 2, "values": ["a8", "a9"]}
    assert sent["timeout"] == 10
    assert resp.status_code == 201
    assert resp.body == {"accepted": 2}
    assert resp.is_success


def test_post_json_falls_back_to_text(monkeypatch):
    client = SequenceClient("http://h:1/ids")
    monkeypatch.setattr(client.session, "post", lambda url, json=None, timeout=None: FakeResponse(502, text="bad gateway"))
    resp = client.post_json({"count": 0, "values": []})
    assert resp.status_code == 502
    assert resp.body == "bad gateway"
    assert not resp.is_success


def test_post_json_network_error(monkeypatch):
    client = SequenceClient("http://h:1/ids")

    def boom(url, json=None, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(client.session, "post", boom)
    resp = client.post_json({})
    assert resp.status_code is None
    assert "refused" in resp.body


def test_raise_for_status():
    ok = APIResponse(status_code=200, body={})
    assert SequenceClient.raise_for_status(ok) is ok

    bad = APIResponse(status_code=500, body={"error": "server error"})
    try:
        SequenceClient.raise_for_status(bad)
    except APIError as err:
        assert err.status_code == 500
        assert err.response is bad
    else:
        raise AssertionError("APIError not raised")


def test_post_json_uses_response_attached_to_error(monkeypatch):
    client = SequenceClient("http://h:1/ids")

    def boom(url, json=None, timeout=None):
        raise requests.HTTPError("conflict", response=FakeResponse(409, {"error": "duplicate"}))

    monkeypatch.setattr(client.session, "post", boom)
    resp = client.post_json({"count": 1, "values": ["a"]})
    assert resp.status_code == 409
    assert resp.body == {"error": "duplicate"}


def test_is_success_covers_2xx_only():
    assert APIResponse(status_code=204, body=None).is_success
    assert not APIResponse(status_code=302, body=None).is_success
    assert not APIResponse(status_code=None, body="refused").is_success
