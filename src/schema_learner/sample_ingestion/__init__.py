"""Sample ingestion exports."""

from .payload_decoding import (
    SampleDecodeError,
    decode_json_payload,
    is_json_content_type,
    read_payload_file,
    split_root_payload,
)
from .sample_models import NamedSample, ObservedPayload
from .topic_sample_reader import TopicReadError, TopicSampleReader

__all__ = [
    "NamedSample",
    "ObservedPayload",
    "SampleDecodeError",
    "TopicReadError",
    "TopicSampleReader",
    "decode_json_payload",
    "is_json_content_type",
    "read_payload_file",
    "split_root_payload",
]
