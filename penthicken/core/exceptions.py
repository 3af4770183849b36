# Define penthicken specific exceptions

# Base penthicken exceptions
class ThickenError(Exception):
    pass


class BadFileError(ThickenError):
    """Abort reading a missing or unreadable file"""
