from types import SimpleNamespace

import pytest

from assistant_chat.generator import ResponseGenerator


def text_segment(value: str):
    return SimpleNamespace(type="text", text=SimpleNamespace(value=value))


def image_segment():
    return SimpleNamespace(type="image_file", image_file=SimpleNamespace(file_id="file_1"))


class FakeThreadsAPI:
    """
    In-memory stand-in for the `client.beta.threads` surface of the OpenAI SDK.

    Run statuses are consumed one per retrieve call; the last one repeats.
    When a run reports `completed` the configured reply segments are added to
    the thread as an assistant message.
    """

    def __init__(self):
        self.threads = {}
        self.calls = []
        self.fail = set()
        self.run_statuses = ["completed"]
        self.reply_segments = [text_segment("Hello from the assistant")]
        self._thread_seq = 0
        self._run_seq = 0
        self._replied = set()
        self.messages = SimpleNamespace(create=self._create_message, list=self._list_messages)
        self.runs = SimpleNamespace(create=self._create_run, retrieve=self._retrieve_run)

    def _check(self, name):
        self.calls.append(name)
        if name in self.fail:
            raise RuntimeError(f"{name} failed")

    async def create(self):
        self._check("threads.create")
        self._thread_seq += 1
        thread_id = f"thread_{self._thread_seq}"
        self.threads[thread_id] = []
        return SimpleNamespace(id=thread_id)

    async def retrieve(self, thread_id):
        self._check("threads.retrieve")
        if thread_id not in self.threads:
            raise RuntimeError(f"No thread found with id '{thread_id}'")
        return SimpleNamespace(id=thread_id)

    async def _create_message(self, thread_id, role, content):
        self._check("messages.create")
        self.threads[thread_id].append(SimpleNamespace(role=role, content=[text_segment(content)]))
        return SimpleNamespace(id=f"msg_{len(self.threads[thread_id])}")

    async def _create_run(self, thread_id, assistant_id):
        self._check("runs.create")
        self._run_seq += 1
        return SimpleNamespace(id=f"run_{self._run_seq}", status="queued", assistant_id=assistant_id)

    async def _retrieve_run(self, run_id, thread_id):
        self._check("runs.retrieve")
        status = self.run_statuses.pop(0) if len(self.run_statuses) > 1 else self.run_statuses[0]
        if status == "completed" and run_id not in self._replied and self.reply_segments is not None:
            self._replied.add(run_id)
            self.threads[thread_id].append(SimpleNamespace(role="assistant", content=list(self.reply_segments)))
        return SimpleNamespace(id=run_id, status=status)

    async def _list_messages(self, thread_id, order="desc"):
        self._check("messages.list")
        data = list(self.threads[thread_id])
        if order == "desc":
            data.reverse()
        return SimpleNamespace(data=data)

    def user_contents(self, thread_id):
        return [m.content[0].text.value for m in self.threads[thread_id] if m.role == "user"]


class RecordingSleep:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def threads_api():
    return FakeThreadsAPI()


@pytest.fixture
def openai_client(threads_api):
    return SimpleNamespace(beta=SimpleNamespace(threads=threads_api))


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def generator(openai_client, recording_sleep):
    return ResponseGenerator(
        openai_client,
        assistant_id="asst_test",
        poll_interval=1.0,
        max_poll_attempts=None,
        thread_id_prefix="thread_",
        sleep=recording_sleep,
    )


@pytest.fixture
def make_segment():
    return SimpleNamespace(text=text_segment, image=image_segment)
