"""Redis Backend: persistência de mensagens, status e logs de canal.

Mensagens e logs são anexados a listas por canal; o último status aceito de
cada mensagem fica em uma chave própria, atualizada com WATCH/MULTI para que
webhooks concorrentes nunca façam o status regredir.

Contrato de Keys:
    Keys usam apenas uuid do canal e ids opacos (interno ou do provedor).
    Nenhum dado de contato (telefone, nome) compõe uma key.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError, WatchError

from app.domain import MsgStatusValue
from app.domain.status import can_advance
from utils.errors import StorageError

from .entity_factory import EntityFactoryBackend, status_key

if TYPE_CHECKING:
    from collections.abc import Sequence

    from redis.asyncio import Redis as AsyncRedis

    from app.domain import ChannelLog, InboundMsg, MsgStatus

logger = logging.getLogger(__name__)

KEY_PREFIX = "gateway:"
STATUS_TTL_SECONDS = 7 * 24 * 3600
MAX_WATCH_RETRIES = 3


class RedisBackend(EntityFactoryBackend):
    """Backend assíncrono sobre Redis.

    Args:
        redis_client: Cliente Redis assíncrono
        status_ttl_seconds: TTL da chave de último status por mensagem
    """

    def __init__(
        self,
        redis_client: AsyncRedis[bytes],
        *,
        status_ttl_seconds: int = STATUS_TTL_SECONDS,
    ) -> None:
        self._redis = redis_client
        self._status_ttl = status_ttl_seconds

    def _msgs_key(self, channel_uuid: str) -> str:
        return f"{KEY_PREFIX}msgs:{channel_uuid}"

    def _statuses_key(self, channel_uuid: str) -> str:
        return f"{KEY_PREFIX}statuses:{channel_uuid}"

    def _logs_key(self, channel_uuid: str) -> str:
        return f"{KEY_PREFIX}logs:{channel_uuid}"

    def _latest_key(self, status: MsgStatus) -> str:
        return f"{KEY_PREFIX}latest:{status.channel.uuid}:{status_key(status)}"

    # ──────────────────────────────────────────────────────────────
    # BackendProtocol
    # ──────────────────────────────────────────────────────────────

    async def write_msgs(self, msgs: Sequence[InboundMsg]) -> None:
        if not msgs:
            return
        try:
            pipeline = self._redis.pipeline()
            for msg in msgs:
                pipeline.rpush(self._msgs_key(msg.channel.uuid), json.dumps(msg.as_dict()))
            await pipeline.execute()
        except RedisError as exc:
            raise StorageError("Falha ao gravar mensagens no Redis") from exc

    async def write_msg_status(self, status: MsgStatus) -> None:
        try:
            for _ in range(MAX_WATCH_RETRIES):
                try:
                    await self._write_status_once(status)
                    return
                except WatchError:
                    logger.debug("status_write_conflict", extra={"channel_uuid": status.channel.uuid})
        except RedisError as exc:
            raise StorageError("Falha ao gravar status no Redis") from exc
        raise StorageError("Conflito persistente ao gravar status", reason="status_write_conflict")

    async def _write_status_once(self, status: MsgStatus) -> None:
        latest_key = self._latest_key(status)
        async with self._redis.pipeline(transaction=True) as pipe:
            await pipe.watch(latest_key)
            raw = await pipe.get(latest_key)
            if raw is not None:
                current = MsgStatusValue(raw.decode())
                if not can_advance(current, status.status):
                    await pipe.unwatch()
                    logger.info(
                        "status_regression_ignored",
                        extra={
                            "channel_uuid": status.channel.uuid,
                            "current_status": current.value,
                            "new_status": status.status.value,
                        },
                    )
                    return
            pipe.multi()
            pipe.set(latest_key, status.status.value, ex=self._status_ttl)
            pipe.rpush(self._statuses_key(status.channel.uuid), json.dumps(status.as_dict()))
            if status.logs:
                pipe.rpush(
                    self._logs_key(status.channel.uuid),
                    *(json.dumps(log.as_dict()) for log in status.logs),
                )
            await pipe.execute()

    async def write_channel_logs(self, logs: Sequence[ChannelLog]) -> None:
        if not logs:
            return
        try:
            pipeline = self._redis.pipeline()
            for log in logs:
                pipeline.rpush(self._logs_key(log.channel_uuid), json.dumps(log.as_dict()))
            await pipeline.execute()
        except RedisError as exc:
            raise StorageError("Falha ao gravar logs de canal no Redis") from exc
