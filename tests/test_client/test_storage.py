import json

from assistant_chat.client import THREAD_ID_STORAGE_KEY, ConversationController, InMemoryStore, JsonFileStore


class NullResponder:
    async def respond(self, messages, thread_id):
        raise AssertionError("not expected to be called")


def test_in_memory_store():
    """
    Test get, set and remove on the in-memory store.
    """
    store = InMemoryStore({"a": "1"})
    assert store.get("a") == "1"
    store.set("b", "2")
    store.remove("a")
    store.remove("missing")
    assert store.get("a") is None
    assert store.get("b") == "2"


def test_json_store_missing_file_reads_empty(tmp_path):
    """
    Test reading a JSON store whose file does not exist yet.
    """
    store = JsonFileStore(tmp_path / "state.json")
    assert store.get("anything") is None
    store.remove("anything")
    assert not (tmp_path / "state.json").exists()


def test_json_store_persists_across_instances(tmp_path):
    """
    Test that JSON store values survive a new instance.
    """
    path = tmp_path / "nested" / "state.json"
    JsonFileStore(path).set("key", "value")

    assert JsonFileStore(path).get("key") == "value"
    assert json.loads(path.read_text(encoding="utf-8")) == {"key": "value"}


def test_json_store_remove(tmp_path):
    """
    Test removing one key from the JSON store.
    """
    store = JsonFileStore(tmp_path / "state.json")
    store.set("keep", "1")
    store.set("drop", "2")

    store.remove("drop")

    assert store.get("drop") is None
    assert store.get("keep") == "1"


def test_json_store_ignores_corrupt_file(tmp_path):
    """
    Test that an unreadable store file is treated as empty.
    """
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    store = JsonFileStore(path)

    assert store.get("key") is None
    store.set("key", "value")
    assert store.get("key") == "value"


def test_controller_thread_survives_restart_with_file_store(tmp_path):
    """
    Test restoring the thread id from a file store.
    """
    path = tmp_path / "state.json"
    first = ConversationController(NullResponder(), store=JsonFileStore(path))
    first.thread_id = "thread_xyz"

    second = ConversationController(NullResponder(), store=JsonFileStore(path))

    assert second.thread_id == "thread_xyz"


def test_malformed_value_on_disk_is_removed(tmp_path):
    """
    Test that a malformed thread id on disk is dropped.
    """
    path = tmp_path / "state.json"
    path.write_text(json.dumps({THREAD_ID_STORAGE_KEY: "oops"}), encoding="utf-8")

    controller = ConversationController(NullResponder(), store=JsonFileStore(path))

    assert controller.thread_id is None
    assert THREAD_ID_STORAGE_KEY not in json.loads(path.read_text(encoding="utf-8"))
