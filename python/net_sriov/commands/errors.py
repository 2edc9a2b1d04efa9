class SriovError(Exception):
    exit_code = 1


# sysfs errors:
class SysfsReadError(SriovError):
    exit_code = 2


class PreconditionError(SriovError):
    exit_code = 3


class SysfsWriteError(SriovError):
    exit_code = 4


# Generic errors:
class ConfigurationError(SriovError):
    exit_code = 5


class PartialFailureError(SriovError):
    exit_code = 6
