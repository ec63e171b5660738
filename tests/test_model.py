import itertools
import threading
from pathlib import Path

import pytest

from gisapp import config
from gisapp.model import (
    GISAction,
    GISChannel,
    ProjectContext,
    get_global_channel,
    get_global_receiver,
    get_global_sender,
    get_project_context,
    with_project_extension,
)


def _drain(channel):
    while True:
        try:
            channel.receive(timeout=0)
        except TimeoutError:
            return


def test_send_then_receive_returns_action():
    channel = GISChannel()
    channel.send(GISAction.MAP_IMAGE_UPDATED)
    assert channel.receive(timeout=1) is GISAction.MAP_IMAGE_UPDATED


def test_receive_on_empty_channel_times_out():
    channel = GISChannel()
    with pytest.raises(TimeoutError):
        channel.receive(timeout=0.01)


def test_send_rejects_non_action():
    channel = GISChannel()
    with pytest.raises(TypeError):
        channel.send("map updated")
    with pytest.raises(TimeoutError):
        channel.receive(timeout=0)


def test_iteration_yields_sent_actions_in_order():
    channel = GISChannel()
    for _ in range(3):
        channel.send(GISAction.MAP_IMAGE_UPDATED)
    received = list(itertools.islice(channel, 3))
    assert received == [GISAction.MAP_IMAGE_UPDATED] * 3


def test_receive_across_threads():
    channel = GISChannel()
    worker = threading.Thread(target=channel.send, args=(GISAction.MAP_IMAGE_UPDATED,))
    worker.start()
    assert channel.receive(timeout=2) is GISAction.MAP_IMAGE_UPDATED
    worker.join()


def test_global_channel_is_shared():
    assert get_global_channel() is get_global_channel()
    assert get_global_sender() is get_global_channel()
    assert get_global_receiver() is get_global_channel()


def test_global_sender_reaches_global_receiver():
    receiver = get_global_receiver()
    _drain(receiver)
    get_global_sender().send(GISAction.MAP_IMAGE_UPDATED)
    assert receiver.receive(timeout=1) is GISAction.MAP_IMAGE_UPDATED
    with pytest.raises(TimeoutError):
        receiver.receive(timeout=0)


def test_project_context_defaults_are_empty():
    context = ProjectContext()
    assert context.project_file is None
    assert context.map_image_file is None


def test_project_context_changes_persist():
    with get_project_context() as context:
        context.map_image_file = Path("maps/world.png")
    with get_project_context() as context:
        assert context.map_image_file == Path("maps/world.png")


def test_project_context_is_a_singleton():
    with get_project_context() as first:
        pass
    with get_project_context() as second:
        pass
    assert first is second


def test_project_context_access_is_exclusive():
    entered = []

    def worker():
        with get_project_context() as context:
            entered.append(context)

    with get_project_context() as held:
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join(timeout=0.1)
        assert entered == []
    thread.join(timeout=2)
    assert entered == [held]


def test_with_project_extension_appends_extension():
    assert with_project_extension("projects/city") == Path("projects/city.gisproj")


def test_with_project_extension_accepts_path():
    result = with_project_extension(Path("a") / "b")
    assert result.name == "b" + config.APP_FILE_EXT
    assert result.parent == Path("a")