"""The base engine object: name, order, activity, delayed destruction and debug flag."""

from __future__ import annotations

from gmengine.serializer import SerializableObject


class EngineObject(SerializableObject):
    """A named object that can be switched off, destroyed now or after a delay."""

    def __init__(self, name: str = "", order: int = 0) -> None:
        self.name = name
        self.order = order
        self._destroyed = False
        self._active = True
        self._death_time_check = False
        self._death_time = 0.0
        self._cur_death_time = 0.0
        self._debug = False

    def is_active(self) -> bool:
        """Active and not destroyed."""
        return self._active and not self._destroyed

    def is_destroy(self) -> bool:
        return self._destroyed

    def destroy(self, time: float = 0.0) -> None:
        """Destroy now, or after ``time`` seconds of release time checks."""
        self._death_time = time
        if 0.0 < time:
            self._death_time_check = True
            return
        self._destroyed = True

    def release_time_check(self, delta_time: float) -> None:
        """Advance a pending delayed destruction by ``delta_time``."""
        if not self._death_time_check:
            return
        self._cur_death_time += delta_time
        if self._death_time <= self._cur_death_time:
            self._destroyed = True

    def release_check(self, delta_time: float) -> None:
        """Hook for subclasses that release resources each frame."""

    def set_active(self, active: bool) -> None:
        self._active = active

    def active_switch(self) -> None:
        self._active = not self._active

    def is_debug(self) -> bool:
        return self._debug

    def debug_on(self) -> None:
        self._debug = True

    def debug_off(self) -> None:
        self._debug = False

    def debug_switch(self) -> None:
        self._debug = not self._debug