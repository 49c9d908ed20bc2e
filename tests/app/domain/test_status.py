"""Testes do status canônico e da trilha de logs de canal."""

from __future__ import annotations

import pytest

from app.domain import ChannelLog, MsgStatus, MsgStatusValue, can_advance
from tests.fakes.fake_gateway import make_channel

S = MsgStatusValue


class TestCanAdvance:
    """Testes para can_advance."""

    @pytest.mark.parametrize(
        ("current", "new"),
        [
            (S.WIRED, S.SENT),
            (S.SENT, S.DELIVERED),
            (S.ERRORED, S.WIRED),
            (S.WIRED, S.FAILED),
            (S.SENT, S.SENT),
        ],
    )
    def test_allowed(self, current: MsgStatusValue, new: MsgStatusValue) -> None:
        assert can_advance(current, new)

    @pytest.mark.parametrize(
        ("current", "new"),
        [
            (S.DELIVERED, S.SENT),
            (S.SENT, S.WIRED),
            (S.DELIVERED, S.FAILED),
        ],
    )
    def test_never_regresses(self, current: MsgStatusValue, new: MsgStatusValue) -> None:
        assert not can_advance(current, new)


class TestMsgStatus:
    """Testes para MsgStatus."""

    def test_logs_are_append_only_snapshot(self) -> None:
        channel = make_channel("ZV")
        status = MsgStatus(channel=channel, status=S.ERRORED, msg_id=1)
        log = ChannelLog(
            description="Message Sent",
            channel_uuid=channel.uuid,
            msg_id=1,
            method="POST",
            url="https://example.com",
            status_code=200,
            request="{}",
            response="{}",
            elapsed_ms=1.0,
        )

        snapshot = status.logs
        status.add_log(log)

        assert snapshot == ()
        assert status.logs == (log,)

    def test_as_dict(self) -> None:
        channel = make_channel("ZW")
        status = MsgStatus(channel=channel, status=S.DELIVERED, external_id="abc")

        assert status.as_dict() == {
            "type": "status",
            "channel_uuid": channel.uuid,
            "status": "D",
            "msg_id": None,
            "external_id": "abc",
        }
