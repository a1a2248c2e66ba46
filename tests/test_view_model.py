import pytest

from fluentkit.view_model import Scope, ViewModel, ViewModelManager


class _Window:
    pass


@pytest.fixture
def manager():
    return ViewModelManager()


def test_window_scope_key_uses_window_identity(manager):
    window = _Window()
    vm = ViewModel("page", {"count": 0}, Scope.WINDOW, window, manager)
    vm.complete()
    assert vm.key == f"page-{id(window):x}"
    assert manager.exist(vm.key)


def test_application_scope_key_is_name(manager):
    vm = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    vm.complete()
    assert vm.key == "page"
    assert manager.get_model("page") == {"count": 0}


def test_change_propagates_to_same_key(manager):
    window = _Window()
    first = ViewModel("page", {"count": 0}, Scope.WINDOW, window, manager)
    second = ViewModel("page", {"count": 0}, Scope.WINDOW, window, manager)
    first.complete()
    second.complete()
    first.set("count", 5)
    assert second.get("count") == 5
    assert manager.get_model(first.key)["count"] == 5


def test_different_windows_are_isolated(manager):
    first = ViewModel("page", {"count": 0}, Scope.WINDOW, _Window(), manager)
    second = ViewModel("page", {"count": 0}, Scope.WINDOW, _Window(), manager)
    first.complete()
    second.complete()
    first.set("count", 3)
    assert second.get("count") == 0
    assert first.key != second.key


def test_application_scope_shared_across_windows(manager):
    first = ViewModel("settings", {"flag": False}, Scope.APPLICATION, _Window(), manager)
    second = ViewModel("settings", {"flag": False}, Scope.APPLICATION, _Window(), manager)
    first.complete()
    second.complete()
    second.set("flag", True)
    assert first.get("flag") is True


def test_existing_store_overrides_initial_values(manager):
    first = ViewModel("page", {"text": "a"}, Scope.APPLICATION, None, manager)
    first.complete()
    first.set("text", "b")
    late = ViewModel("page", {"text": "initial"}, Scope.APPLICATION, None, manager)
    late.complete()
    assert late.get("text") == "b"


def test_init_handlers_run_before_store_creation(manager):
    vm = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    vm.init_handlers.append(lambda model: model.set("count", 7))
    vm.complete()
    assert manager.get_model("page") == {"count": 7}
    assert vm.get("count") == 7


def test_init_handlers_skipped_when_store_exists(manager):
    calls = []
    first = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    first.complete()
    second = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    second.init_handlers.append(calls.append)
    second.complete()
    assert calls == []


def test_set_before_complete_stays_local(manager):
    vm = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    vm.set("count", 2)
    assert vm.get("count") == 2
    assert manager.exist("page") is False


def test_closed_view_model_no_longer_refreshed(manager):
    first = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    second = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    first.complete()
    second.complete()
    second.close()
    first.set("count", 9)
    assert second.get("count") == 0


def test_context_manager_closes(manager):
    other = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    other.complete()
    with ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager) as vm:
        vm.complete()
    other.set("count", 4)
    assert vm.get("count") == 0


def test_unknown_property_raises(manager):
    vm = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    with pytest.raises(KeyError):
        vm.get("missing")
    with pytest.raises(KeyError):
        vm.set("missing", 1)


def test_complete_twice_raises(manager):
    vm = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    vm.complete()
    with pytest.raises(RuntimeError):
        vm.complete()


def test_manager_store_roundtrip(manager):
    store = {"a": 1}
    assert manager.get_model("k") is None
    manager.insert("k", store)
    assert manager.exist("k")
    assert manager.get_model("k") is store


def test_manager_refresh_does_not_touch_store(manager):
    first = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    second = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, manager)
    first.complete()
    second.complete()
    manager.refresh(first, "count", 6)
    assert first.get("count") == 6
    assert second.get("count") == 6
    assert manager.get_model("page")["count"] == 0
    assert second.enable_property_change is True


def test_unregister_unknown_is_ignored(manager):
    vm = ViewModel("page", {"count": 0}, Scope.APPLICATION, None, ViewModelManager())
    manager.unregister(vm)
    manager.refresh(vm, "count", 1)
    assert vm.get("count") == 0