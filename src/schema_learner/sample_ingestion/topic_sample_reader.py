"""Kafka topic sample source."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from confluent_kafka import Consumer, KafkaError

from schema_learner.configuration.runtime_settings import KafkaSettings

from .payload_decoding import decode_json_payload
from .sample_models import ObservedPayload

_KAFKA_CLIENT_LOGGER = logging.getLogger("schema_learner.kafka.client")
_KAFKA_CLIENT_LOGGER.addHandler(logging.NullHandler())
_KAFKA_CLIENT_LOGGER.propagate = False
_KAFKA_CLIENT_LOGGER.setLevel(logging.CRITICAL + 1)

_LOGGER = logging.getLogger(__name__)


class TopicReadError(Exception):
    """Raised when the Kafka consumer reports a non-recoverable error."""


class KafkaConsumerProtocol(Protocol):
    """Protocol implemented by both real and fake consumers."""

    def subscribe(self, topics: list[str], **kwargs: Any) -> None: ...

    def poll(self, timeout: float) -> _KafkaRawMessage | None: ...

    def close(self) -> None: ...


class _KafkaRawMessage(Protocol):
    """Subset of Kafka message API required by the reader."""

    def error(self) -> Any: ...

    def key(self) -> bytes | None: ...

    def value(self) -> bytes | None: ...


class TopicSampleReader:
    """Consumes JSON messages from a topic and yields them as observed payloads."""

    def __init__(
        self,
        kafka_settings: KafkaSettings,
        consumer: KafkaConsumerProtocol | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = kafka_settings
        self._consumer = consumer or self._create_consumer()
        self._clock = clock or (lambda: datetime.now(UTC))

    def consume(self, max_messages: int | None = None) -> Iterator[ObservedPayload]:
        """Yield decoded payloads until the configured timeout elapses.

        Messages without a value or with a body that is not valid JSON are
        skipped. The consumer is closed when iteration stops.
        """
        self._consumer.subscribe([self._settings.topic])
        end_time = self._clock() + timedelta(seconds=self._settings.timeout_seconds)
        delivered = 0
        try:
            while self._clock() < end_time:
                if max_messages is not None and delivered >= max_messages:
                    break
                message = self._consumer.poll(timeout=self._settings.poll_interval_ms / 1000.0)
                if message is None:
                    continue
                if message.error():
                    if message.error().code() == KafkaError._PARTITION_EOF:
                        continue
                    raise TopicReadError(f"Kafka error: {message.error()}")
                payload = decode_json_payload(message.value())
                if payload is None:
                    _LOGGER.debug("Skipping undecodable message on %s.", self._settings.topic)
                    continue
                delivered += 1
                yield ObservedPayload(
                    origin=self._describe_origin(message.key()),
                    payload=payload,
                )
        finally:
            self._consumer.close()

    def _describe_origin(self, key: bytes | None) -> str:
        if key is None:
            return self._settings.topic
        try:
            return f"{self._settings.topic}:{key.decode('utf-8')}"
        except UnicodeDecodeError:
            return self._settings.topic

    def _create_consumer(self) -> KafkaConsumerProtocol:
        config = {
            "bootstrap.servers": ",".join(self._settings.bootstrap_servers),
            "group.id": self._settings.group_id or "schema-learner",
            "enable.auto.commit": False,
            "auto.offset.reset": self._settings.auto_offset_reset,
        }
        config.update(self._settings.security)
        try:
            return Consumer(config, logger=_KAFKA_CLIENT_LOGGER)
        except TypeError:
            # Older/mock Consumer implementations may not support the logger kwarg.
            return Consumer(config)
