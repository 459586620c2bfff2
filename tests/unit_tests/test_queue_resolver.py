import pytest
from launcher.errors import QueueInvalidError, WorkerModuleNotFoundError
from queue_workers.modules import FileUploadWorkerModule
from queue_workers.queues import QUEUES, Queue
from queue_workers.resolver import missing_worker_modules, resolve_queue
from tests.consts import TEST_QUEUE_KEY, TEST_QUEUE_NAME


def test_resolve_queue__known_key():
    resolved = resolve_queue(TEST_QUEUE_KEY)

    assert resolved.queue_name == TEST_QUEUE_NAME
    assert resolved.worker_root is FileUploadWorkerModule


@pytest.mark.parametrize("key", [None, "", "file_upload", "file-upload", "UNKNOWN"])
def test_resolve_queue__invalid_key(key):
    with pytest.raises(QueueInvalidError) as exc_info:
        resolve_queue(key)

    assert exc_info.value.queue_key == key
    assert str(exc_info.value) == f"QUEUE INVALID OR NOT PROVIDED: {key}"


def test_resolve_queue__key_without_worker_module():
    queues = {TEST_QUEUE_KEY: Queue.FILE_UPLOAD}

    with pytest.raises(WorkerModuleNotFoundError) as exc_info:
        resolve_queue(TEST_QUEUE_KEY, queues=queues, worker_modules={})

    assert str(exc_info.value) == f"MODULE NOT FOUND FOR {TEST_QUEUE_KEY} QUEUE"


def test_every_queue_has_a_worker_module():
    assert missing_worker_modules() == []


def test_missing_worker_modules__reports_gaps():
    assert missing_worker_modules(QUEUES, {}) == list(QUEUES)
