from typing import Optional

from loguru import logger
from youtube_transcript_api.proxies import GenericProxyConfig, ProxyConfig, WebshareProxyConfig


class ProxyService:
    """
    Builds the proxy configuration handed to youtube-transcript-api.

    A host/port pair selects a generic HTTP proxy (credentials optional);
    credentials alone select Webshare rotating residential proxies.
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
    ):
        self.username = username
        self.password = password
        self.host = host
        self.port = port

    def get_proxy_config(self) -> Optional[ProxyConfig]:
        if self.host and self.port:
            credentials = ""
            if self.username and self.password:
                credentials = f"{self.username}:{self.password}@"
            proxy_url = f"http://{credentials}{self.host}:{self.port}"
            logger.info(f"Fetching transcript through proxy {self.host}:{self.port}")
            return GenericProxyConfig(http_url=proxy_url, https_url=proxy_url)

        if self.username and self.password:
            logger.info("Fetching transcript through Webshare rotating proxies")
            return WebshareProxyConfig(
                proxy_username=self.username,
                proxy_password=self.password,
            )

        logger.info("Proxy settings not configured. Using direct connection.")
        return None
