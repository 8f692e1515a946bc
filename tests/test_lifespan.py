import threading
import types

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

import rental_api.main as main
from rental_api.uploads import FileStore


@pytest.fixture(autouse=True)
def keep_thread_excepthook(monkeypatch):
    # the lifespan installs its own hook; put the original back afterwards
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)


@pytest.fixture
def upload_store(tmp_path, monkeypatch):
    store = FileStore(tmp_path / "uploads")
    monkeypatch.setattr(main, "get_file_store", lambda: store)
    return store


def test_unreachable_database_aborts_startup(monkeypatch, upload_store):
    async def unreachable():
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    monkeypatch.setattr(main, "connect_to_mongo", unreachable)

    with pytest.raises(ServerSelectionTimeoutError):
        with TestClient(main.app):
            pass


def test_startup_survives_upload_dir_and_index_failures(monkeypatch, tmp_path):
    blocker = tmp_path / "uploads"
    blocker.write_text("not a directory")
    monkeypatch.setattr(main, "get_file_store", lambda: FileStore(blocker))

    async def connected():
        pass

    init_calls = []

    async def failing_init_db(database):
        init_calls.append(database)
        return False

    monkeypatch.setattr(main, "connect_to_mongo", connected)
    monkeypatch.setattr(main, "init_db", failing_init_db)

    with TestClient(main.app) as client:
        assert client.get("/health").status_code == 200

    assert init_calls
    assert blocker.is_file()


def test_startup_creates_upload_directory(monkeypatch, upload_store):
    async def connected():
        pass

    async def init_db(database):
        return True

    monkeypatch.setattr(main, "connect_to_mongo", connected)
    monkeypatch.setattr(main, "init_db", init_db)

    with TestClient(main.app):
        assert upload_store.directory.is_dir()


@pytest.fixture
def terminations(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "_terminate", lambda: calls.append(True))
    return calls


class FakeLoop:
    def __init__(self):
        self.delegated = []

    def default_exception_handler(self, context):
        self.delegated.append(context)


def test_task_exception_terminates(terminations):
    loop = FakeLoop()

    main._handle_loop_exception(loop, {
        "message": "Task exception was never retrieved",
        "exception": RuntimeError("boom"),
    })

    assert terminations == [True]
    assert loop.delegated == []


def test_loop_message_without_exception_is_delegated(terminations):
    loop = FakeLoop()
    context = {"message": "Executing <Task> took 0.2 seconds"}

    main._handle_loop_exception(loop, context)

    assert terminations == []
    assert loop.delegated == [context]


def test_thread_exception_terminates(terminations):
    try:
        raise ValueError("worker failed")
    except ValueError as e:
        args = types.SimpleNamespace(
            exc_type=ValueError,
            exc_value=e,
            exc_traceback=e.__traceback__,
            thread=threading.current_thread(),
        )

    main._handle_thread_exception(args)

    assert terminations == [True]
