"""Exception classes for the neon glow engine."""


class NeonError(Exception):
    """Base exception for neonstag errors."""

    pass


class SvgParseError(NeonError):
    """Raised when the input text is not well-formed XML."""

    pass


class MissingSvgRootError(NeonError):
    """Raised when a parsed document contains no <svg> element."""

    pass


class UnsupportedFileError(NeonError):
    """Raised for uploads that are not SVG text (wrong MIME type, extension or encoding)."""

    pass
