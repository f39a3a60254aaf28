"""HTTP transport backed by botocore's urllib3 session."""

from typing import Optional

import structlog
from botocore.awsrequest import AWSRequest  # type: ignore
from botocore.httpsession import URLLib3Session  # type: ignore

from infrastructure.clients.aws.models import HttpResponse

logger = structlog.get_logger()


class BotocoreTransport:
    """Sends signed requests over a pooled urllib3 session.

    Exceptions raised by botocore (EndpointConnectionError,
    ConnectTimeoutError, ReadTimeoutError, ...) propagate to the caller.

    Args:
        connect_timeout: Seconds to wait for a connection
        read_timeout: Seconds to wait for a response
        max_pool_connections: Size of the connection pool
        http_session: Pre-built URLLib3Session (tests, proxies)
    """

    def __init__(
        self,
        connect_timeout: float = 60.0,
        read_timeout: float = 60.0,
        max_pool_connections: int = 10,
        http_session: Optional[URLLib3Session] = None,
    ) -> None:
        self._http_session = http_session or URLLib3Session(
            timeout=(connect_timeout, read_timeout),
            max_pool_connections=max_pool_connections,
        )

    def send(self, request: AWSRequest) -> HttpResponse:
        prepared = request.prepare()
        logger.debug("http_request_sent", method=prepared.method, url=prepared.url)
        response = self._http_session.send(prepared)
        return HttpResponse.create(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
        )

    def close(self) -> None:
        self._http_session.close()
