# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""
`manage configuration for the reflection tools`
==================

Load configuration (ini) file content and explicit overrides, creating validated
configuration settings, then wire the configured logger into the reflection modules.
"""

from collections import namedtuple
import configparser
from dataclasses import dataclass
import logging
import os
from pathlib import Path
import platform
from typing import Dict, FrozenSet, Iterable, Optional, TextIO, Union

from reflection_support import LoggerMixin, SentinelTag
from .setting_enum import Setting

ConfigurationType = Union[str, Dict[str, str]]

@dataclass(frozen=True)
class IniKey:
    """
    keys for configuration (ini) file entries.
    """
    main: str = 'Main'

@dataclass(frozen=True)
class IniStr:
    """
    Constant strings used for the structure that describes a documented ini file.
    """
    description: str = 'description'
    settings: str = 'settings'
    doc: str = 'doc'
    default: str = 'default'
    comment: str = 'comment'  # optional

@dataclass(frozen=True)
class Tag:
    """
    keys for SentinelTag instances.
    """
    no_entry: str = 'No entry exists'

SettingKeys = namedtuple('SettingKeys', ['settings', 'ini'])
'''
Keys (str) to access settings information in different contexts
settings: the internal configuration dictionary key
ini: the key in an ini configuration file
'''

@dataclass(frozen=True)
class CfgKey:
    """
    keys for configuration setting entries.
    """
    loglevel: SettingKeys = SettingKeys(settings=Setting.LOGGING_LEVEL.name,
                                        ini='logging-level')
    logger: SettingKeys = SettingKeys(  settings=Setting.LOGGER_NAME.name,
                                        ini='logger-name')
    '''Above attributes associate internal configuration settings with ini file entries'''

    main_options: FrozenSet = frozenset({'loglevel', 'logger'})
    '''CfgKey attribute names of the [Main] section entries'''
    loglevel_choices: FrozenSet = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})

@dataclass(frozen=True)
class ReflectionConfiguration:
    """Manages setting configuration information for the reflection tools

    This creates a valid base (default) configuration, cascades validated configuration
    (ini) file information and explicit overrides over it, then provides access to the
    immutable settings.

    Attributes:
        logging_level (str): minimum severity for reflection log records
        logger_name (str): name of the Logger the reflection modules report to
    """
    # pylint:disable=no-member
    logging_level: str
    logger_name: str

    def __init__(self, application_name: str, *,  # pylint:disable=too-many-arguments
                 config_files: Iterable[Path] = (),
                 use_user_config: bool = True,
                 use_project_config: bool = False,
                 logging_level: Optional[str] = None,
                 logger_name: Optional[str] = None):
        """
        initialize ReflectionConfiguration instance

        Configuration files are loaded in order: the user configuration file, the project
        (current working directory) configuration file, then config_files. Each file
        modifies the settings left by the previous one. Explicit arguments are applied last.

        Args:
            application_name (str) The name used to find configuration files
            config_files (Iterable[Path]) additional configuration files to load
            use_user_config (bool) load <user config folder>/<name>/<name>.ini when it exists
            use_project_config (bool) load ./<name>.ini when it exists
            logging_level (str) override for the configured logging level
            logger_name (str) override for the configured logger name

        Raises
            ValueError when the final logging level is not a valid choice
        """
        object.__setattr__(self, '_app_name', application_name)
        settings = _default_configuration()
        if use_user_config:
            _load_configuration_file(settings, self._user_config_path(), required=False)
        if use_project_config:
            _load_configuration_file(settings, self._project_config_path(), required=False)
        for cfg_file in config_files:
            if not _load_configuration_file(settings, Path(cfg_file), required=True):
                LoggerMixin.get_logger().error(
                    'configuration file "%s" could not be loaded', cfg_file)
        if logging_level is not None:
            settings[CfgKey.loglevel.settings] = logging_level
        if logger_name is not None:
            settings[CfgKey.logger.settings] = logger_name

        object.__setattr__(self, 'logging_level', settings[CfgKey.loglevel.settings])
        object.__setattr__(self, 'logger_name', settings[CfgKey.logger.settings])
        if self.logging_level not in CfgKey.loglevel_choices:
            raise ValueError(f'logging level {self.logging_level} is not one of '
                             f'{sorted(CfgKey.loglevel_choices)}')
        if not self.logger_name:
            raise ValueError('logger name can not be empty')

    def get(self, setting: Setting) -> str:
        """
        Get the value of a single setting.

        Args:
            setting (Setting): the setting to look up
        """
        return {
            Setting.LOGGING_LEVEL: self.logging_level,
            Setting.LOGGER_NAME: self.logger_name,
        }[setting]

    def apply_logging(self, handler: Optional[logging.Handler] = None) -> logging.Logger:
        """
        Configure the named logger, and make it the logger used by the reflection modules.

        Args:
            handler (Handler): handler to add to the logger. When not supplied, a
                StreamHandler is added if the logger does not have any handler yet.

        Returns (Logger) the configured logger
        """
        logger = logging.getLogger(self.logger_name)
        logger.setLevel(self.logging_level)
        if handler is not None:
            if handler not in logger.handlers:
                logger.addHandler(handler)
        elif not logger.handlers:
            logger.addHandler(logging.StreamHandler())
        LoggerMixin.set_logger(logger)
        logger.debug('reflection logging configured at %s for "%s"',
                     self.logging_level, self._app_name)
        return logger

    def write_default_ini(self, output: TextIO) -> None:
        """
        Output the default configuration file, with embedded documentation.

        Args:
            output (TextIO): A file-like object where the INI content will be written.
        """
        def_reference = _default_configuration()
        ini_details = {
            IniKey.main: {
                IniStr.description: f'''Documented reflection configuration template file

The first configuration read, if it exists, is from the operating system specific
user application configuration folder. On linux, this is
~/.config/{self._app_name}/{self._app_name}.ini

Main section''',
                IniStr.settings: {
                    CfgKey.loglevel.ini: {
                        IniStr.doc: 'Minimum severity level for reflection log messages.',
                        IniStr.default: def_reference[CfgKey.loglevel.settings],
                        IniStr.comment: 'choose one of: DEBUG, INFO, WARNING, ERROR, CRITICAL'
                    },
                    CfgKey.logger.ini: {
                        IniStr.doc: 'Name of the logger that the reflection tools report to.',
                        IniStr.default: def_reference[CfgKey.logger.settings],
                    },
                }
            },
        }
        generate_ini_file(output, ini_details)

    def _user_config_path(self) -> Path:
        """the path to the user application configuration file"""
        return get_config_path(self._app_name) / f'{self._app_name}.ini'

    def _project_config_path(self) -> Path:
        """the path to the project application configuration file"""
        return Path.cwd() / f'{self._app_name}.ini'

def _default_configuration() -> Dict[str, ConfigurationType]:
    """The builtin base (default) configuration settings"""
    return {
        CfgKey.loglevel.settings: logging.getLevelName(logging.WARNING),
        CfgKey.logger.settings: 'reflection',
    }

def _load_configuration_file(settings: Dict[str, ConfigurationType], file_path: Path, *,
                             required: bool) -> bool:
    """
    Merge settings from a configuration file

    Invalid entries are logged and skipped, keeping the previous value.

    Args:
        settings (dict): the configuration settings being collected
        file_path (Path): the path to the configuration file
        required (bool): report a missing file when True

    Returns
        (bool): True if the file was loaded, False otherwise
    """
    if not (required or file_path.is_file()):
        return False
    config = get_config_file(file_path)
    if config is None:
        return False
    if IniKey.main not in config.sections():
        return True

    section = config[IniKey.main]
    for entry in sorted(CfgKey.main_options):
        entry_keys: SettingKeys = getattr(CfgKey, entry)
        ini_value = section.get(entry_keys.ini, fallback=SentinelTag(Tag.no_entry))
        if ini_value is SentinelTag(Tag.no_entry) or not ini_value:
            continue
        allowed = getattr(CfgKey, entry + '_choices', None)
        if allowed is not None and ini_value not in allowed:
            LoggerMixin.get_logger().error(
                'Invalid %s value "%s" found in "%s". Valid values are: %s',
                entry_keys.ini, ini_value, file_path, ', '.join(sorted(allowed)))
            continue
        settings[entry_keys.settings] = ini_value
    LoggerMixin.get_logger().info('settings loaded from "%s"', file_path)
    return True

def get_config_path(app_name: str) -> Path:
    """Determine the configuration path for the application based on the operating system.

    Args:
        app_name (str): The name of the application.

    Returns:
        Path: The path to the configuration directory for the application.
    """
    if platform.system() == 'Windows':
        return Path(os.getenv('APPDATA', '')) / app_name
    if platform.system() == 'Darwin':
        return Path.home() / 'Library' / 'Application Support' / app_name
    return Path.home() / '.config' / app_name

def get_config_file(config_file: Path) -> Optional[configparser.ConfigParser]:
    """
    loads a configuration file into a new ConfigParser instance

    Args:
        config_file (Path): the path to the configuration file

    Returns
        ConfigParser instance populated with the configuration file content, or None when
        the file does not exist, or can not be read.
    """
    config = configparser.ConfigParser()

    if not config_file.is_file():
        # config.read() silently ignores missing files
        LoggerMixin.get_logger().warning('Configuration file "%s" not found', config_file)
        return None

    try:
        config.read(config_file)
        return config
    except PermissionError:
        LoggerMixin.get_logger().error(
            'Unable to read "%s" due to insufficient permissions.', config_file)
    except (configparser.Error, OSError, UnicodeDecodeError) as e:
        LoggerMixin.get_logger().error('Error reading "%s": %s', config_file, e)

    return None

def generate_ini_file(output: TextIO, structure: Dict[str, dict]) -> None:
    """
    Writes a documented ini file, where every setting is commented out at its default.

        ; description for section
        [Section]
        ; documentation for setting
        ; setting = default ; optional comment

    Args:
        output (TextIO): A file-like object where the INI content will be written.
        structure (Dict): section name to IniStr keyed description and settings.
    """
    c_pfx = '; '
    for section, content in structure.items():
        output.write(f"{_insert_prefix(content[IniStr.description], c_pfx)}\n")
        output.write(f"[{section}]\n")
        for setting, info in content[IniStr.settings].items():
            output.write(f"{_insert_prefix(info[IniStr.doc], c_pfx)}\n")
            comment = info.get(IniStr.comment)
            optional_comment = f' {c_pfx}{comment}' if comment else ''
            output.write(f"{c_pfx}{setting} = {info[IniStr.default]}{optional_comment}\n\n")
        output.write("\n")

def _insert_prefix(input_string: str, prefix: str) -> str:
    """add prefix to the start of every non-blank line"""
    return '\n'.join(line if line == '' else prefix + line
                     for line in (raw.strip() for raw in input_string.split('\n')))

# cSpell:words configparser pathlib appdata levelname
# cSpell:allowCompoundWords true
