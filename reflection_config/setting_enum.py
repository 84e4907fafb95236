# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""
`setting enum`

An enum that defines the (names for) configuration settings used by the reflection tools

"""
from enum import Enum, auto

class Setting(Enum):
    """settings that can be accessed from internal configuration"""
    LOGGING_LEVEL = auto()
    LOGGER_NAME = auto()
