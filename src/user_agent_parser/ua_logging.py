# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

LEVELS = {
    "debug": 10,
    "info": 20,
}


class Logger:
    """Minimal named logger that prints messages at or above its level.

    Library code logs at debug level, which is silent unless the caller
    lowers the threshold, e.g. ``log.level = "debug"``.
    """

    def __init__(self, name: str, level: str = "info"):
        self.name = name
        self.level = level

    @property
    def level(self) -> str:
        return self._level

    @level.setter
    def level(self, value: str) -> None:
        if value not in LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        self._level = value

    def is_enabled_for(self, prefix: str) -> bool:
        return LEVELS[prefix] >= LEVELS[self._level]

    def _print(self, prefix: str, msg: str) -> None:
        print(f"{prefix.upper()}: {self.name} {msg}")

    def _emit(self, prefix: str, msg: str) -> None:
        if self.is_enabled_for(prefix):
            self._print(prefix, msg)

    def debug(self, msg: str) -> None:
        self._emit("debug", msg)
