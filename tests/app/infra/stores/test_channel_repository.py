"""Testes do ChannelRepository (YAML de canais)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from app.infra.stores import ChannelConfigError, ChannelRepository
from app.infra.stores.channel_repository import resolve_env_refs
from utils.errors import ChannelNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

CHANNELS_YAML = """
channels:
  - uuid: 8eb23e93-5ecb-45ba-b726-3b064e0c56ab
    channel_type: zw
    name: Atendimento WhatsApp
    address: "+5511999999999"
    country: br
    config:
      api_key: ${ZW_TEST_TOKEN}
  - uuid: 0f0e1a43-04fd-4d1c-a7a5-6de08d1a2f01
    channel_type: ZV
    config:
      username: conta
      password: 1234
"""


class TestChannelRepository:
    """Testes para ChannelRepository."""

    def test_from_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZW_TEST_TOKEN", "tok-123")
        path = tmp_path / "channels.yaml"
        path.write_text(CHANNELS_YAML, encoding="utf-8")

        repository = ChannelRepository.from_yaml(path)
        channel = repository.get("ZW", "8eb23e93-5ecb-45ba-b726-3b064e0c56ab")

        assert len(repository) == 2
        assert channel.channel_type == "ZW"
        assert channel.country == "BR"
        assert channel.config_value("api_key") == "tok-123"

    def test_unset_env_reference_resolves_to_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ZW_TEST_TOKEN", raising=False)
        channel = ChannelRepository.from_data(
            {
                "channels": [
                    {
                        "uuid": "zw-1",
                        "channel_type": "ZW",
                        "config": {"api_key": "${ZW_TEST_TOKEN}", "note": "a-${ZW_TEST_TOKEN}-b"},
                    }
                ]
            }
        ).get("ZW", "zw-1")

        assert channel.config_value("api_key") == ""
        assert channel.config_value("note") == "a--b"

    def test_resolve_env_refs(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FC_TEST_SECRET", "s3cr3t")
        monkeypatch.delenv("FC_TEST_MISSING", raising=False)
        assert resolve_env_refs("${FC_TEST_SECRET}") == "s3cr3t"
        assert resolve_env_refs("${FC_TEST_MISSING}") == ""
        assert resolve_env_refs("$FC_TEST_SECRET") == "$FC_TEST_SECRET"

    def test_numeric_config_values_become_strings(self, tmp_path: Path) -> None:
        path = tmp_path / "channels.yaml"
        path.write_text(CHANNELS_YAML, encoding="utf-8")

        channel = ChannelRepository.from_yaml(path).get("zv", "0f0e1a43-04fd-4d1c-a7a5-6de08d1a2f01")

        assert channel.config_value("password") == "1234"

    def test_unknown_channel_raises_not_found(self) -> None:
        with pytest.raises(ChannelNotFoundError) as exc_info:
            ChannelRepository().get("ZW", "missing")
        assert exc_info.value.http_status == 404

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ChannelConfigError):
            ChannelRepository.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "channels.yaml"
        path.write_text("channels: [\n", encoding="utf-8")

        with pytest.raises(ChannelConfigError):
            ChannelRepository.from_yaml(path)

    @pytest.mark.parametrize(
        "data",
        [
            {"channels": [{"uuid": "x", "channel_type": "TOOLONG"}]},
            {"channels": [{"uuid": "x", "channel_type": "ZW", "extra": 1}]},
            {"channels": "not-a-list"},
        ],
    )
    def test_invalid_records(self, data: dict) -> None:
        with pytest.raises(ChannelConfigError):
            ChannelRepository.from_data(data)

    def test_duplicate_channel(self) -> None:
        record = {"uuid": "x", "channel_type": "ZW"}
        with pytest.raises(ChannelConfigError):
            ChannelRepository.from_data({"channels": [record, record]})
