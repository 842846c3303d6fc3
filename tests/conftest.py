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
from unittest.mock import patch

import pytest

from src.user_agent_parser.ua_logging import Logger


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test", level="debug")
        self.debug_messages: list[str] = []

    def _print(self, prefix: str, msg: str) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


@pytest.fixture
def version_log(mock_logger: MockLogger):
    """Route the version module's log output into a MockLogger."""
    with patch("src.user_agent_parser.version.log", mock_logger):
        yield mock_logger
