# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import threading


class KeyedLocks:
    """Lazily created lock per key; the registry itself is guarded."""

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lk = self._locks.get(key)
            if lk is None:
                lk = threading.Lock()
                self._locks[key] = lk
            return lk
