"""Exceptions raised by figtext"""


class InvalidArgument(ValueError):
    """A numeric, unit or naming argument is outside its valid domain"""


class FontNotFound(LookupError):
    """A font is unknown to the catalog or an alias is not registered"""
