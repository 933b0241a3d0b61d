"""
Blob store, filename and media type helper tests
"""
import io
import re

import pytest

from app.services.thumbnail_upload import random_filename
from app.storage import LocalBlobStore
from app.utils import parse_media_type


@pytest.fixture
def blobs(tmp_path):
    store = LocalBlobStore(str(tmp_path / "assets"), "http://cdn.local/assets/")
    store.ensure_root()
    return store


def test_write_copies_all_bytes(blobs):
    data = bytes(range(256)) * 40

    size = blobs.write("a.png", io.BytesIO(data))

    assert size == len(data)
    assert blobs.path_for("a.png").read_bytes() == data


def test_write_never_overwrites(blobs):
    blobs.write("a.png", io.BytesIO(b"first"))

    with pytest.raises(FileExistsError):
        blobs.write("a.png", io.BytesIO(b"second"))

    assert blobs.path_for("a.png").read_bytes() == b"first"


def test_url_for_joins_base_url(blobs):
    assert blobs.url_for("a.png") == "http://cdn.local/assets/a.png"


def test_random_filename_shape():
    name = random_filename(".jpg")

    assert re.fullmatch(r"[A-Za-z0-9_-]{43}\.jpg", name)
    assert random_filename(".jpg") != name


@pytest.mark.parametrize(
    "value, expected",
    [
        ("image/png", "image/png"),
        ("image/jpeg; q=0.9", "image/jpeg"),
        (" Image/JPEG ", "image/jpeg"),
        ("text/plain; charset=utf-8", "text/plain"),
        ('multipart/form-data; boundary="a;b"', "multipart/form-data"),
        ("image/png;", "image/png"),
    ],
)
def test_parse_media_type(value, expected):
    assert parse_media_type(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "jpeg",
        "image/",
        "/png",
        "image/png/x",
        "image png",
        "image/png; =bad",
        "image/png; charset",
        "image/png; a=b c",
    ],
)
def test_parse_media_type_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_media_type(value)
