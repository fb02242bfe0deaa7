"""Command-line flag recognition, the checksum and the help/version texts."""

from __future__ import annotations

import enum

__all__ = ["Flag", "get_flag", "adler32", "usage_text", "version_text"]

VERSION = "0.1 (pre-release)"

_MOD_ADLER = 65521
_UINT32 = 0xFFFFFFFF
_BOLD = "\033[1m"
_RESET = "\033[0m"


class Flag(enum.IntEnum):
    """Kinds of command-line argument."""

    HELP = 0
    VERSION = 1
    EXCLUDE = 2
    INVALID = -1
    NOT_A_FLAG = -2


_KNOWN_FLAGS = {
    "-h": Flag.HELP,
    "-v": Flag.VERSION,
    "-e": Flag.EXCLUDE,
}


def get_flag(arg: str) -> Flag:
    """Classify a command-line argument.

    Anything not starting with ``-`` is not a flag; ``-h``, ``-v`` and ``-e``
    are recognised; every other ``-...`` argument is an invalid flag.
    """
    if not arg.startswith("-"):
        return Flag.NOT_A_FLAG
    return _KNOWN_FLAGS.get(arg, Flag.INVALID)


def adler32(data: bytes) -> int:
    """Return the Adler-32 style checksum of ``data``.

    Bytes are taken as signed 8-bit values and sums wrap at 32 bits before
    the modulo, so for pure ASCII input the result equals standard Adler-32.
    """
    a, b = 1, 0
    for byte in data:
        value = byte - 256 if byte >= 128 else byte
        a = ((a + value) & _UINT32) % _MOD_ADLER
        b = (b + a) % _MOD_ADLER
    return ((b << 16) | a) & _UINT32


def _heading(title: str) -> str:
    return f"{_BOLD}{title}{_RESET}\n"


def usage_text() -> str:
    """Return the usage instructions and option descriptions."""
    return (
        _heading("NAME")
        + "\tmangen - генерирует манифест каталога\n\n"
        + _heading("SYNOPSIS")
        + "\t./mangen [DIR_PATH] [OPTIONS]\n\n"
        + _heading("DESCRIPTION")
        + "\tДанная утилита генерирует манифест каталога (список пар из\n"
        "\tимени/пути файла и значения его хэш-суммы)\n\n"
        "\tЗапускаться утилита должна строкой вида:\n"
        "\t./mangen [DIR_PATH] [OPTIONS], где DIR_PATH - путь к каталогу,\n"
        "\tманифест которого будет генерироваться. В случае отсутствия пути\n"
        "\tв аргументах командной строки необходимо генерировать манифест для\n"
        "\tтекущего каталога. OPTIONS является опциями командной строки,\n"
        f"\tописанными далее.\n\n\t{_BOLD}The following options are available:{_RESET}\n\n"
        f"\t{_BOLD}-v{_RESET}\n\n\tВывести информацию о версии и об авторе и завершить"
        "исполнение\n\n"
        f"\t{_BOLD}-e [FILE_NAME]{_RESET}\n\n\tИсключает из обработки все файлы/каталоги с именем "
        "FILE_NAME,\n"
        "\tгде FILE_NAME - регулярное выражение с обработкой '.' (точка)\n"
        "\tкак произвольного символа и '*' (астериск) как произвольной\n"
        "\tпоследовательности символов.\n"
        "\tОбратите внимание. Если мы запускаем утилиту таким образом:\n"
        "\t./mangen some_dir -e some_dir,\n"
        "\tто для каталога some_dir всё равно будет сгенерирован манифест.\n"
    )


def version_text() -> str:
    """Return the program name and version."""
    return (
        _heading("NAME")
        + "\tmangen - генерирует манифест каталога\n\n"
        + _heading("VERSION")
        + f"\t{VERSION}\n"
    )