"""Testes do AdapterRegistry (registro explícito, lookup puro, selagem)."""

from __future__ import annotations

import pytest

from app.registry import AdapterRegistry, RegistrySealedError
from tests.fakes.fake_gateway import FakeServer
from utils.errors import ChannelNotFoundError


class FakeHandler:
    """Adapter mínimo que registra uma rota `receive`."""

    def __init__(self, channel_type: str, name: str = "Fake") -> None:
        self.channel_type = channel_type
        self.name = name
        self.initialized_with: object | None = None

    def initialize(self, server) -> None:
        self.initialized_with = server
        server.add_handler_route(self, "POST", "receive", self.receive)

    async def receive(self, channel, request):
        return None

    async def send(self, msg):
        raise NotImplementedError


class RegistryServer(FakeServer):
    """FakeServer que delega o registro de rotas ao AdapterRegistry."""

    def __init__(self, registry: AdapterRegistry) -> None:
        super().__init__()
        self._registry = registry

    def add_handler_route(self, handler, method, action, route) -> None:
        self._registry.add_route(handler, method, action, route)


@pytest.fixture
def registry() -> AdapterRegistry:
    return AdapterRegistry([FakeHandler("FC"), FakeHandler("SL")])


class TestAdapterRegistry:
    """Testes para AdapterRegistry."""

    def test_lookup_is_case_insensitive(self, registry: AdapterRegistry) -> None:
        assert registry.get("fc").channel_type == "FC"
        assert "sl" in registry
        assert len(registry) == 2

    def test_unknown_channel_type(self, registry: AdapterRegistry) -> None:
        with pytest.raises(ChannelNotFoundError) as exc_info:
            registry.get("XX")
        assert exc_info.value.reason == "unknown_channel_type"

    @pytest.mark.parametrize("code", ["F", "FCX", "f1", "fc"])
    def test_rejects_invalid_code(self, code: str) -> None:
        with pytest.raises(ValueError):
            AdapterRegistry([FakeHandler(code)])

    def test_rejects_duplicate_code(self) -> None:
        with pytest.raises(ValueError):
            AdapterRegistry([FakeHandler("ZV"), FakeHandler("ZV")])

    def test_initialize_collects_routes_and_seals(self, registry: AdapterRegistry) -> None:
        server = RegistryServer(registry)

        registry.initialize(server)

        assert registry.sealed
        assert registry.routes() == [("FC", "POST", "receive"), ("SL", "POST", "receive")]
        assert registry.get("FC").initialized_with is server
        assert registry.route("fc", "post", "receive") is not None

    def test_sealed_registry_rejects_changes(self, registry: AdapterRegistry) -> None:
        registry.initialize(RegistryServer(registry))

        with pytest.raises(RegistrySealedError):
            registry.register(FakeHandler("ZW"))
        with pytest.raises(RegistrySealedError):
            registry.initialize(RegistryServer(registry))

    def test_missing_route(self, registry: AdapterRegistry) -> None:
        registry.initialize(RegistryServer(registry))

        with pytest.raises(ChannelNotFoundError) as exc_info:
            registry.route("FC", "POST", "status")
        assert exc_info.value.reason == "route_not_found"

    def test_route_for_unregistered_handler_is_rejected(self, registry: AdapterRegistry) -> None:
        stranger = FakeHandler("ZW")

        with pytest.raises(ValueError):
            registry.add_route(stranger, "POST", "receive", stranger.receive)
