"""View models whose properties are shared among every instance with the same key."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from functools import lru_cache
from typing import Any


class Scope(Enum):
    """How widely a view model's state is shared."""

    WINDOW = "window"
    APPLICATION = "application"


class ViewModelManager:
    """Holds the shared property stores and the live view models."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}
        self._view_models: list[ViewModel] = []

    def exist(self, key: str) -> bool:
        """Whether a store exists for ``key``."""
        return key in self._data

    def insert(self, key: str, model: dict[str, Any]) -> None:
        """Register the property store for ``key``."""
        self._data[key] = model

    def get_model(self, key: str) -> dict[str, Any] | None:
        """Return the property store for ``key``, or None if there is none."""
        return self._data.get(key)

    def register(self, view_model: ViewModel) -> None:
        """Start tracking a view model."""
        self._view_models.append(view_model)

    def unregister(self, view_model: ViewModel) -> None:
        """Stop tracking a view model; unknown ones are ignored."""
        if view_model in self._view_models:
            self._view_models.remove(view_model)

    def refresh(self, view_model: ViewModel, name: str, value: Any) -> None:
        """Push a property value to every tracked view model sharing the key."""
        for item in list(self._view_models):
            if item.key == view_model.key:
                item.enable_property_change = False
                try:
                    item._assign(name, value)
                finally:
                    item.enable_property_change = True


@lru_cache(maxsize=None)
def _shared_manager() -> ViewModelManager:
    return ViewModelManager()


class ViewModel:
    """A set of named properties kept in step with others of the same key.

    Until :meth:`complete` is called the properties are local. Completing
    either creates the shared store from the current values or, if one
    already exists for the key, adopts its values.
    """

    def __init__(
        self,
        name: str,
        properties: Mapping[str, Any] | None = None,
        scope: Scope = Scope.WINDOW,
        window: object | None = None,
        manager: ViewModelManager | None = None,
    ) -> None:
        self.name = name
        self.scope = Scope(scope)
        self.window = window
        self.enable_property_change = True
        self.init_handlers: list[Callable[[ViewModel], None]] = []
        self._values: dict[str, Any] = dict(properties or {})
        self._manager = manager if manager is not None else _shared_manager()
        self._key = ""
        self._model: dict[str, Any] | None = None
        self._closed = False
        self._manager.register(self)

    @property
    def key(self) -> str:
        """The sharing key; empty until completed."""
        return self._key

    @property
    def properties(self) -> dict[str, Any]:
        """A copy of the current property values."""
        return dict(self._values)

    def complete(self) -> None:
        """Attach to the shared store for this view model's key."""
        if self._model is not None:
            raise RuntimeError("view model is already complete")
        if self._closed:
            raise RuntimeError("view model is closed")
        if self.scope is Scope.WINDOW:
            window_id = 0 if self.window is None else id(self.window)
            self._key = f"{self.name}-{window_id:x}"
        else:
            self._key = self.name

        existing = self._manager.get_model(self._key)
        if existing is None:
            for handler in list(self.init_handlers):
                handler(self)
            model = dict(self._values)
            self._manager.insert(self._key, model)
        else:
            model = existing
        self._model = model
        for name, value in model.items():
            self._values[name] = value

    def get(self, name: str) -> Any:
        """Return the value of a property."""
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"unknown property: {name!r}") from None

    def set(self, name: str, value: Any) -> None:
        """Change a property and share the change once completed."""
        self._assign(name, value)
        if self._model is not None and self.enable_property_change and not self._closed:
            self._model[name] = value
            self._manager.refresh(self, name, value)

    def _assign(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise KeyError(f"unknown property: {name!r}")
        self._values[name] = value

    def close(self) -> None:
        """Stop taking part in sharing."""
        if not self._closed:
            self._closed = True
            self._manager.unregister(self)

    def __enter__(self) -> ViewModel:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()