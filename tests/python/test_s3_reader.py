import sys

import pytest

from docsplit import (
    DependencyUnavailableError,
    ObjectPartitionLoader,
    ObjectStoreConfig,
    RetrievalError,
    S3ObjectReader,
)


class FakeBody:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self.closed = False

    def read(self) -> bytes:
        return self._data

    def close(self) -> None:
        self.closed = True


class FakeS3Client:
    def __init__(self, objects: dict[tuple[str, str], bytes]) -> None:
        self._objects = objects
        self.bodies: list[FakeBody] = []

    def get_object(self, *, Bucket: str, Key: str) -> dict[str, object]:
        if (Bucket, Key) not in self._objects:
            raise LookupError(f"NoSuchKey: {Key}")
        body = FakeBody(self._objects[(Bucket, Key)])
        self.bodies.append(body)
        return {"Body": body}


def test_read_object_materializes_full_body() -> None:
    client = FakeS3Client({("docs", "a.pdf"): b"%PDF-1.7 body"})
    reader = S3ObjectReader(client=client)

    assert reader.read_object("docs", "a.pdf") == b"%PDF-1.7 body"
    assert client.bodies[0].closed


def test_read_object_propagates_client_errors() -> None:
    reader = S3ObjectReader(client=FakeS3Client({}))

    with pytest.raises(LookupError, match="NoSuchKey"):
        reader.read_object("docs", "missing.pdf")


def test_loader_reports_missing_key_as_retrieval_error() -> None:
    class NeverCalled:
        def partition(self, data, file_name, config=None):
            raise AssertionError("partitioner must not be called")

    loader = ObjectPartitionLoader(
        object_reader=S3ObjectReader(client=FakeS3Client({})),
        partitioner=NeverCalled(),
    )

    with pytest.raises(RetrievalError, match="NoSuchKey: missing.pdf"):
        loader.load("docs", "missing.pdf")


def test_create_client_builds_s3_client_from_store_config(monkeypatch: pytest.MonkeyPatch) -> None:
    import boto3

    created: list[tuple[str | None, str, dict[str, str]]] = []
    s3_client = FakeS3Client({("docs", "a.pdf"): b"payload"})

    class FakeSession:
        def __init__(self, profile_name: str | None = None) -> None:
            self.profile_name = profile_name

        def client(self, service_name: str, **kwargs: str) -> FakeS3Client:
            created.append((self.profile_name, service_name, kwargs))
            return s3_client

    monkeypatch.setattr(boto3, "Session", FakeSession)
    config = ObjectStoreConfig(
        region_name="us-east-1",
        endpoint_url="http://minio.local:9000",
        profile_name="ingest",
    )
    reader = S3ObjectReader(config)

    assert reader.read_object("docs", "a.pdf") == b"payload"
    assert reader.read_object("docs", "a.pdf") == b"payload"
    assert created == [
        ("ingest", "s3", {"region_name": "us-east-1", "endpoint_url": "http://minio.local:9000"}),
    ]


def test_create_client_reports_missing_boto3(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "boto3", None)

    with pytest.raises(DependencyUnavailableError, match="boto3"):
        S3ObjectReader().read_object("docs", "a.pdf")
