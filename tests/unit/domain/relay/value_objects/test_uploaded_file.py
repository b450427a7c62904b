"""Tests for UploadedFile value object."""

import dataclasses

import pytest

from src.domain.relay.constants import MAX_FILE_SIZE_BYTES
from src.domain.relay.value_objects import UploadedFile
from src.domain.shared.exceptions import EmptyFileError, FileSizeExceededError


def test_create_derives_size_from_content():
    uploaded = UploadedFile.create("a.txt", b"0123456789", "text/plain")

    assert uploaded.size == 10
    assert uploaded.filename == "a.txt"
    assert uploaded.content_type == "text/plain"
    assert uploaded.max_size_bytes == MAX_FILE_SIZE_BYTES


def test_create_defaults_content_type():
    uploaded = UploadedFile.create("blob", b"\x00\x01")

    assert uploaded.content_type == "application/octet-stream"


def test_empty_content_rejected():
    with pytest.raises(EmptyFileError):
        UploadedFile.create("empty.txt", b"")


def test_content_over_limit_rejected():
    with pytest.raises(FileSizeExceededError) as exc_info:
        UploadedFile.create("big.bin", b"x" * 11, max_size_bytes=10)

    assert exc_info.value.file_size_bytes == 11
    assert exc_info.value.max_size_bytes == 10


def test_content_at_limit_accepted():
    uploaded = UploadedFile.create("edge.bin", b"x" * 10, max_size_bytes=10)

    assert uploaded.size == 10


def test_size_must_match_content():
    with pytest.raises(ValueError, match="size must equal content length"):
        UploadedFile(filename="a.txt", content=b"abc", content_type="text/plain", size=4)


def test_is_immutable():
    uploaded = UploadedFile.create("a.txt", b"abc")

    with pytest.raises(dataclasses.FrozenInstanceError):
        uploaded.size = 1


def test_repr_omits_content():
    uploaded = UploadedFile.create("a.txt", b"secret-bytes")

    assert "secret-bytes" not in repr(uploaded)
