from configparser import ConfigParser, MissingSectionHeaderError, NoSectionError
from pathlib import Path
from typing import Any, Generator, Union


class Settings:
    """
    Settings are thin interface with the configparser within python. Conceptually it's a
    dictionary of dictionaries. The first dictionary key are called sections, and the sub-
    section are attributes.

    Values are loaded during the `read_configuration` step and looked up with
    `read_persistent`, which converts them to the requested type.
    """

    def __init__(self, filename: Union[str, Path]):
        self._config_file = Path(filename)
        self._config_dict = {}
        self.read_configuration()

    def read_configuration(self):
        """
        Read configuration reads the self._config_file to get the parsed config file data.

        Missing, unreadable or headerless files leave the settings empty.

        @return:
        """
        try:
            parser = ConfigParser()
            parser.read(self._config_file, encoding="utf-8")
            for section in parser.sections():
                for option in parser.options(section):
                    try:
                        config_section = self._config_dict[section]
                    except KeyError:
                        config_section = dict()
                        self._config_dict[section] = config_section
                    config_section[option] = parser.get(section, option)
        except (
            PermissionError,
            NoSectionError,
            MissingSectionHeaderError,
            FileNotFoundError,
            IsADirectoryError,
            UnicodeDecodeError,
        ):
            return

    def read_persistent(
        self,
        t: type,
        section: str,
        key: str,
        default: Union[str, int, float, bool, None] = None,
    ) -> Any:
        """
        Directly read from persistent storage the value of an item.

        @param t: datatype.
        @param section: storing section
        @param key: reference item
        @param default: default value if item does not exist or does not convert.
        @return: value
        """
        try:
            value = self._config_dict[section][key]
            if t == bool:
                return value == "True"
            if t == int:
                # "2.7" is a valid count, truncated like on the command line.
                return int(float(value))
            return t(value)
        except (KeyError, ValueError, OverflowError):
            return default

    def keylist(self, section: str) -> Generator[str, None, None]:
        """
        Get all keys located at the given section.

        @param section: section to check for keys.
        @return:
        """
        try:
            yield from self._config_dict[section]
        except KeyError:
            return
