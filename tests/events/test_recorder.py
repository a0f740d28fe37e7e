"""Tests for EventRecorder hooks and consumption."""

import pytest

from bridgetrace.config import RecorderConfig
from bridgetrace.errors import LogUnderflowError
from bridgetrace.events import (
    Call,
    CallResult,
    EntryFilter,
    EventListener,
    EventRecorder,
    EventType,
)
from tests.conftest import ENGINE, EchoService, RecordingCancelCallback, RecordingSuspendCallback

EVERYTHING = EntryFilter.everything()


def record_every_hook(recorder: EventRecorder) -> list[str]:
    """Invoke each hook once, returning the expected messages in order."""
    echo = EchoService()
    call = Call("echo", "echo", ["hi"], echo)
    failure = OSError("offline")

    recorder.engine_created(ENGINE)
    recorder.bind_service(ENGINE, "echo", echo)
    recorder.take_service(ENGINE, "remote", echo)
    token = recorder.call_start(ENGINE, call)
    recorder.call_end(ENGINE, call, CallResult.success("hi"), token)
    recorder.service_leaked(ENGINE, "remote")
    recorder.application_load_start("red", "https://example.com/red.json")
    recorder.application_load_success("red", "https://example.com/red.json", ENGINE, None)
    recorder.application_load_skipped("red", "https://example.com/red.json", None)
    recorder.application_load_failed("red", None, failure, None)
    recorder.download_start("red", "https://example.com/red.js")
    recorder.download_end("red", "https://example.com/red.js", None)
    recorder.download_failed("red", "https://example.com/red.js", failure, None)
    recorder.manifest_parse_failed("red", "https://example.com/red.json", failure)
    recorder.module_load_start(ENGINE, "red.js")
    recorder.module_load_end(ENGINE, "red.js", None)
    recorder.engine_closed(ENGINE)

    return [
        "ziplineCreated",
        "bindService echo",
        "takeService remote",
        "callStart 1 echo echo [hi]",
        "callEnd 1 echo echo [hi] Success(hi)",
        "serviceLeaked remote",
        "applicationLoadStart red https://example.com/red.json",
        "applicationLoadSuccess red https://example.com/red.json",
        "applicationLoadSkipped red https://example.com/red.json",
        "applicationLoadFailed red OSError: offline",
        "downloadStart red https://example.com/red.js",
        "downloadEnd red https://example.com/red.js",
        "downloadFailed red https://example.com/red.js OSError: offline",
        "manifestParseFailed red https://example.com/red.json",
        "moduleLoadStart red.js",
        "moduleLoadEnd red.js",
        "ziplineClosed",
    ]


class TestHooks:
    """Tests for entry encoding."""

    def test_is_event_listener(self, recorder: EventRecorder) -> None:
        assert isinstance(recorder, EventListener)

    def test_every_hook_in_order(self, recorder: EventRecorder) -> None:
        """Draining with no filter returns one message per hook, in call order."""
        expected = record_every_hook(recorder)

        assert len(recorder) == len(expected)
        assert recorder.take_all(EVERYTHING) == expected
        assert len(recorder) == 0

    def test_entry_fields(self, recorder: EventRecorder) -> None:
        """Each hook sets only the identifiers its category carries."""
        record_every_hook(recorder)
        entries = {entry.event_type: entry for entry in recorder.pending()}

        bind = entries[EventType.BIND_SERVICE]
        assert (bind.service_name, bind.module_id, bind.application_name) == ("echo", None, None)

        leaked = entries[EventType.SERVICE_LEAKED]
        assert leaked.service_name == "remote"
        assert leaked.is_internal_service is False

        download = entries[EventType.DOWNLOAD_END]
        assert (download.application_name, download.service_name) == ("red", None)

        module = entries[EventType.MODULE_LOAD_START]
        assert (module.module_id, module.application_name) == ("red.js", None)

        created = entries[EventType.ENGINE_CREATED]
        assert (created.module_id, created.service_name, created.application_name) == (None, None, None)

    def test_failures_stored_verbatim(self, recorder: EventRecorder) -> None:
        """Failure hooks keep the exact object they were given."""
        failure = OSError("offline")
        recorder.application_load_failed("red", "https://example.com/red.json", failure, None)
        recorder.download_failed("red", "https://example.com/red.js", failure, None)
        recorder.manifest_parse_failed("red", None, failure)

        assert all(entry.failure is failure for entry in recorder.pending())

    def test_non_failure_hooks_have_no_failure(self, recorder: EventRecorder) -> None:
        recorder.application_load_start("red", None)
        recorder.download_start("red", "https://example.com/red.js")

        assert all(entry.failure is None for entry in recorder.pending())

    def test_null_manifest_url(self, recorder: EventRecorder) -> None:
        recorder.application_load_start("red", None)

        assert recorder.take() == "applicationLoadStart red null"

    def test_call_end_failure_result(self, recorder: EventRecorder) -> None:
        call = Call("echo", "echo", ["hi"], EchoService())
        token = recorder.call_start(ENGINE, call)
        recorder.call_end(ENGINE, call, CallResult.of_failure(ValueError("bad")), token)

        assert recorder.take_all() == [
            "callStart 1 echo echo [hi]",
            "callEnd 1 echo echo [hi] Failure(ValueError: bad)",
        ]

    def test_module_load_start_returns_none(self, recorder: EventRecorder) -> None:
        assert recorder.module_load_start(ENGINE, "red.js") is None


class TestCallCorrelation:
    """Tests for call start/end correlation ids."""

    def test_ids_start_at_one_and_increase(self, recorder: EventRecorder) -> None:
        call = Call("Foo", "bar")

        first = recorder.call_start(ENGINE, call)
        second = recorder.call_start(ENGINE, call)

        assert first == 1
        assert second == first + 1

    def test_end_echoes_start_value(self, recorder: EventRecorder) -> None:
        outer = Call("Foo", "outer", [1])
        inner = Call("Foo", "inner", [2])

        outer_id = recorder.call_start(ENGINE, outer)
        inner_id = recorder.call_start(ENGINE, inner)
        recorder.call_end(ENGINE, inner, CallResult.success(2), inner_id)
        recorder.call_end(ENGINE, outer, CallResult.success(1), outer_id)

        assert recorder.take_all() == [
            "callStart 1 Foo outer [1]",
            "callStart 2 Foo inner [2]",
            "callEnd 2 Foo inner [2] Success(2)",
            "callEnd 1 Foo outer [1] Success(1)",
        ]

    def test_counter_is_per_recorder(self) -> None:
        call = Call("Foo", "bar")
        first = EventRecorder(RecorderConfig())
        second = EventRecorder(RecorderConfig())

        first.call_start(ENGINE, call)
        first.call_start(ENGINE, call)

        assert second.call_start(ENGINE, call) == 1

    def test_consumption_does_not_reset_counter(self, recorder: EventRecorder) -> None:
        call = Call("Foo", "bar")
        recorder.call_start(ENGINE, call)
        recorder.take_all()

        assert recorder.call_start(ENGINE, call) == 2


class TestInternalServices:
    """Tests for internal-service classification at append time."""

    def test_user_service_is_not_internal(self, recorder: EventRecorder) -> None:
        recorder.bind_service(ENGINE, "UserService", EchoService())

        assert recorder.pending()[0].is_internal_service is False

    def test_prefixed_name_is_internal(self, recorder: EventRecorder) -> None:
        recorder.bind_service(ENGINE, "zipline/host", EchoService())

        assert recorder.pending()[0].is_internal_service is True

    def test_plumbing_calls_hidden_by_default(self, recorder: EventRecorder) -> None:
        cancel = RecordingCancelCallback()
        suspend = RecordingSuspendCallback()
        recorder.take_service(ENGINE, "callback/1", suspend)
        recorder.call_start(ENGINE, Call("callback/1", "success", ["ok"], suspend))
        recorder.bind_service(ENGINE, "cancel/1", cancel)
        recorder.bind_service(ENGINE, "echo", EchoService())

        assert recorder.take_all() == ["bindService echo"]

    def test_plumbing_visible_on_request(self, recorder: EventRecorder) -> None:
        recorder.bind_service(ENGINE, "cancel/1", RecordingCancelCallback())
        recorder.bind_service(ENGINE, "echo", EchoService())

        assert recorder.take_all(skip_internal_services=False) == [
            "bindService cancel/1",
            "bindService echo",
        ]

    def test_leaked_internal_name(self, recorder: EventRecorder) -> None:
        recorder.service_leaked(ENGINE, "zipline/console")

        assert recorder.take_all() == []

    def test_configured_prefix(self) -> None:
        recorder = EventRecorder(RecorderConfig(internal_service_prefix="host/"))
        recorder.bind_service(ENGINE, "host/console", EchoService())
        recorder.bind_service(ENGINE, "zipline/console", EchoService())

        assert recorder.take_all() == ["bindService zipline/console"]


class TestTake:
    """Tests for take()."""

    def test_takes_from_head(self, recorder: EventRecorder) -> None:
        recorder.engine_created(ENGINE)
        recorder.engine_closed(ENGINE)

        assert recorder.take() == "ziplineCreated"
        assert recorder.take() == "ziplineClosed"

    def test_skipped_entries_are_discarded(self, recorder: EventRecorder) -> None:
        recorder.module_load_start(ENGINE, "m1")
        recorder.engine_created(ENGINE)

        assert recorder.take(skip_module_events=True) == "ziplineCreated"
        assert recorder.take_all(EVERYTHING) == []

    def test_empty_log_underflows(self, recorder: EventRecorder) -> None:
        with pytest.raises(LogUnderflowError) as exc_info:
            recorder.take()

        assert exc_info.value.discarded == 0

    def test_exhausted_by_filter_underflows(self, recorder: EventRecorder) -> None:
        recorder.module_load_start(ENGINE, "m1")
        recorder.module_load_end(ENGINE, "m1", None)

        with pytest.raises(LogUnderflowError) as exc_info:
            recorder.take(skip_module_events=True)

        assert exc_info.value.discarded == 2
        assert len(recorder) == 0

    def test_underflow_is_assertion_failure(self, recorder: EventRecorder) -> None:
        with pytest.raises(AssertionError):
            recorder.take()

    def test_filter_object(self, recorder: EventRecorder) -> None:
        recorder.bind_service(ENGINE, "echo", EchoService())
        recorder.download_start("red", "https://example.com/red.js")

        assert recorder.take(EntryFilter(skip_service_events=True)) == "downloadStart red https://example.com/red.js"

    def test_switches_override_filter_object(self, recorder: EventRecorder) -> None:
        recorder.bind_service(ENGINE, "zipline/host", EchoService())

        assert recorder.take(EntryFilter(), skip_internal_services=False) == "bindService zipline/host"

    def test_unknown_switch(self, recorder: EventRecorder) -> None:
        recorder.engine_created(ENGINE)

        with pytest.raises(TypeError):
            recorder.take(skip_everything=True)

        assert len(recorder) == 1

    def test_non_filter_argument(self, recorder: EventRecorder) -> None:
        """A bare bool is rejected before the head entry is popped."""
        recorder.engine_created(ENGINE)

        with pytest.raises(TypeError):
            recorder.take(True)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            recorder.take_all(True)  # type: ignore[arg-type]

        assert len(recorder) == 1
        assert recorder.take() == "ziplineCreated"


class TestTakeException:
    """Tests for take_exception()."""

    def test_returns_first_failure(self, recorder: EventRecorder) -> None:
        first = OSError("offline")
        second = ValueError("bad manifest")
        recorder.download_start("red", "https://example.com/red.js")
        recorder.download_failed("red", "https://example.com/red.js", first, None)
        recorder.manifest_parse_failed("red", None, second)

        assert recorder.take_exception() is first
        assert recorder.take_exception() is second

    def test_discards_entries_before_failure(self, recorder: EventRecorder) -> None:
        recorder.engine_created(ENGINE)
        recorder.application_load_failed("red", None, OSError("offline"), None)
        recorder.engine_closed(ENGINE)

        recorder.take_exception()

        assert recorder.take() == "ziplineClosed"

    def test_ignores_filters(self, recorder: EventRecorder) -> None:
        """Failures on internal or application entries are still returned."""
        failure = OSError("offline")
        recorder.application_load_failed("zipline/red", None, failure, None)

        assert recorder.take_exception() is failure

    def test_no_failure_underflows(self, recorder: EventRecorder) -> None:
        recorder.engine_created(ENGINE)
        recorder.engine_closed(ENGINE)

        with pytest.raises(LogUnderflowError) as exc_info:
            recorder.take_exception()

        assert exc_info.value.discarded == 2
        assert len(recorder) == 0


class TestTakeAll:
    """Tests for take_all()."""

    def test_empty_log(self, recorder: EventRecorder) -> None:
        assert recorder.take_all() == []
        assert recorder.take_all(EVERYTHING) == []
        assert recorder.take_all(skip_module_events=True, skip_application_events=True) == []

    def test_drains_even_when_nothing_matches(self, recorder: EventRecorder) -> None:
        recorder.module_load_start(ENGINE, "m1")

        assert recorder.take_all(skip_module_events=True) == []
        assert len(recorder) == 0

    def test_combined_switches(self, recorder: EventRecorder) -> None:
        record_every_hook(recorder)

        assert recorder.take_all(
            skip_module_events=True,
            skip_service_events=True,
            skip_application_events=True,
        ) == ["ziplineCreated", "ziplineClosed"]

    def test_application_events_only(self, recorder: EventRecorder) -> None:
        expected = record_every_hook(recorder)

        assert recorder.take_all(skip_module_events=True, skip_service_events=True) == [
            message for message in expected if message.startswith(("application", "download", "manifest", "engine"))
        ]

    def test_after_take(self, recorder: EventRecorder) -> None:
        expected = record_every_hook(recorder)

        assert recorder.take() == expected[0]
        assert recorder.take_all(EVERYTHING) == expected[1:]


class TestConfiguredDefaults:
    """Tests for the configured default filter."""

    def test_default_filter_from_config(self) -> None:
        config = RecorderConfig(default_filter=EntryFilter(skip_module_events=True))
        recorder = EventRecorder(config)
        recorder.module_load_start(ENGINE, "m1")
        recorder.engine_created(ENGINE)

        assert recorder.take() == "ziplineCreated"

    def test_switches_override_config(self) -> None:
        config = RecorderConfig(default_filter=EntryFilter(skip_module_events=True))
        recorder = EventRecorder(config)
        recorder.module_load_start(ENGINE, "m1")

        assert recorder.take_all(skip_module_events=False) == ["moduleLoadStart m1"]

    def test_config_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BRIDGETRACE_SKIP_INTERNAL_SERVICES", "false")
        recorder = EventRecorder()
        recorder.bind_service(ENGINE, "zipline/host", EchoService())

        assert recorder.config.default_filter.skip_internal_services is False
        assert recorder.take() == "bindService zipline/host"


class TestPending:
    """Tests for the diagnostic snapshot."""

    def test_snapshot_does_not_consume(self, recorder: EventRecorder) -> None:
        recorder.engine_created(ENGINE)

        snapshot = recorder.pending()

        assert [entry.message for entry in snapshot] == ["ziplineCreated"]
        assert len(recorder) == 1
        assert recorder.take() == "ziplineCreated"
        assert snapshot[0].message == "ziplineCreated"
