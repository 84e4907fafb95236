# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""
public information for the reflection_config package
"""

from .reflection_configuration import ReflectionConfiguration, get_config_file, get_config_path
from .setting_enum import Setting

__all__ = ["ReflectionConfiguration", "Setting", "get_config_file", "get_config_path"]
