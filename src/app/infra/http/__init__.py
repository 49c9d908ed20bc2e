"""Infra HTTP compartilhada pelos conectores de provedores."""

from .client import HttpClient, HttpClientConfig, RequestResponse

__all__ = ["HttpClient", "HttpClientConfig", "RequestResponse"]
