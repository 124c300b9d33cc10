import json

import pytest

from zensend import ZenSend


class DummyResp:
    def __init__(self, *, status_code=200, json_payload=None, text=None, content_type="application/json"):
        self.status_code = status_code
        if text is None:
            text = json.dumps(json_payload) if json_payload is not None else ""
        self.text = text
        self.headers = {} if content_type is None else {"Content-Type": content_type}


class DummySession:
    def __init__(self, resp=None, exc=None):
        self._resp = resp
        self._exc = exc
        self.calls = []
        self.closed = False

    def _record(self, method, url, data, headers, timeout):
        self.calls.append(
            {"method": method, "url": url, "data": data, "headers": headers, "timeout": timeout}
        )
        if self._exc is not None:
            raise self._exc
        return self._resp

    def get(self, url, headers=None, timeout=None):
        return self._record("GET", url, None, headers, timeout)

    def post(self, url, data=None, headers=None, timeout=None):
        return self._record("POST", url, data, headers, timeout)

    def close(self):
        self.closed = True


@pytest.fixture
def make_client():
    def _make(json_payload=None, **resp_kwargs):
        sess = DummySession(DummyResp(json_payload=json_payload, **resp_kwargs))
        client = ZenSend("api_key", url="http://127.0.0.1:8080", session=sess)
        return client, sess

    return _make
