import logging
from typing import Any

import requests
from requests.structures import CaseInsensitiveDict

from zensend.encoding import encode_params
from zensend.envelope import classify_response
from zensend.exceptions import TransportError, ZenSendException
from zensend.logging_utils import body_preview, mask_number, mask_numbers, mask_secret
from zensend.models.keyword import CreateKeywordRequest, CreateKeywordResult
from zensend.models.operator_lookup import OperatorLookupResult
from zensend.models.sms_model import Message, SmsResult
from zensend.models.sub_account import SubAccountResult
from zensend.models.zensend import ZenSendResponse
from zensend import operations
from zensend.operations import GET, ApiRequest
from zensend.zensend_api import DEFAULT_URL, ZenSendAPI

logger = logging.getLogger("zensend")


class ZenSend(ZenSendAPI):
    def __init__(
        self,
        api_key: str,
        url: str = DEFAULT_URL,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(api_key, url)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    @classmethod
    def from_env(cls, session: requests.Session | None = None) -> "ZenSend":
        return cls(session=session, **cls.settings_from_env())

    def __enter__(self) -> "ZenSend":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __repr__(self) -> str:
        return f"<ZenSend url={self.base_url} api_key={mask_secret(self._api_key)}>"

    def get_request(self, endpoint: str, query: str) -> requests.Response:
        url = self.url_for(endpoint)
        if query:
            url = f"{url}?{query}"
        try:
            return self._session.get(url, headers=self.headers, timeout=self._timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {e}")
            raise TransportError(e) from e

    def post_request(self, endpoint: str, body: str) -> requests.Response:
        try:
            return self._session.post(
                url=self.url_for(endpoint),
                data=body.encode("utf-8"),
                headers=self.form_headers(),
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {e}")
            raise TransportError(e) from e

    def send_sms(self, message: Message) -> ZenSendResponse[SmsResult]:
        logger.debug(
            f"Sending SMS from {message.originator} to "
            f"{mask_numbers(message.numbers)}: {body_preview(message.body)!r}"
        )
        return self._call(operations.send_sms(message))

    def create_keyword(
        self, keyword_request: CreateKeywordRequest
    ) -> ZenSendResponse[CreateKeywordResult]:
        return self._call(operations.create_keyword(keyword_request))

    def lookup_operator(self, number: str) -> ZenSendResponse[OperatorLookupResult]:
        logger.debug(f"Looking up operator for {mask_number(number)}")
        return self._call(operations.lookup_operator(number))

    def check_balance(self) -> ZenSendResponse[float]:
        return self._call(operations.check_balance())

    def get_prices(self) -> ZenSendResponse[dict[str, float]]:
        return self._call(operations.get_prices())

    def create_sub_account(self, name: str) -> ZenSendResponse[SubAccountResult]:
        return self._call(operations.create_sub_account(name))

    def _call(self, request: ApiRequest) -> ZenSendResponse[Any]:
        encoded = encode_params(request.params)
        logger.debug(f"{request.method} {request.endpoint}")
        try:
            if request.method == GET:
                res = self.get_request(request.endpoint, encoded)
            else:
                res = self.post_request(request.endpoint, encoded)
            payload = self._handle_response(res, request)
        except ZenSendException as e:
            return ZenSendResponse.failed(e)
        return ZenSendResponse.success(request.unwrap(payload))

    def _handle_response(self, res: requests.Response, request: ApiRequest) -> Any:
        # injected transports may hand back a plain dict of headers
        content_type = CaseInsensitiveDict(res.headers).get("Content-Type")
        return classify_response(
            res.status_code, content_type, res.text, request.model
        )
