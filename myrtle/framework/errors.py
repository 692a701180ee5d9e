# myrtle/framework/errors.py
from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes. Every error path has its own code."""
    NORMAL = 0
    ERR_INPUT = -1
    ERR_CMD_LINE = -2
    ERR_OUTPUT = -3
    ERR_UNK_CMD = -4
    ERR_MISSING_ARG = -5


class MyrtleError(Exception):
    """Base class for fatal interpreter errors."""
    exit_code: ExitCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CommandLineError(MyrtleError):
    exit_code = ExitCode.ERR_CMD_LINE


class InputFileError(MyrtleError):
    exit_code = ExitCode.ERR_INPUT


class OutputFileError(MyrtleError):
    exit_code = ExitCode.ERR_OUTPUT


class UnknownCommandError(MyrtleError):
    exit_code = ExitCode.ERR_UNK_CMD

    def __init__(self, command: str, line: int):
        super().__init__(f"Unknown command '{command}' on line {line}")
        self.command = command
        self.line = line


class MissingArgumentError(MyrtleError):
    exit_code = ExitCode.ERR_MISSING_ARG

    def __init__(self, command: str, argument: str, line: int):
        super().__init__(
            f"Command '{command}' on line {line} is missing its '{argument}' argument"
        )
        self.command = command
        self.argument = argument
        self.line = line
