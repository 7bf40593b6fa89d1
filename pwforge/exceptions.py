"""
Exceptions raised by pwforge.
"""


class PwforgeError(Exception):
    """Base exception for pwforge errors"""
    pass


class InvalidConfigError(PwforgeError):
    """Generation or estimation called with arguments outside its contract"""
    pass


class RandomSourceError(PwforgeError):
    """The operating system entropy source failed"""
    pass


class ConfigError(PwforgeError):
    """Error reading the settings file"""
    pass
