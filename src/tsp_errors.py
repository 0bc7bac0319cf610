# tsp_errors.py
"""Error kinds raised while loading points and building tours."""


class TourError(Exception):
    """Base class for every tour-building failure."""


class FileAccessError(TourError, OSError):
    """Input file is missing or unreadable."""

    def __init__(self, filename: str, reason: str = ""):
        msg = f"Could not read file: {filename}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.filename = filename


class EmptyCollection(TourError, ValueError):
    """There are no points to anchor a tour on."""

    def __init__(self, msg: str = "Point collection is empty; nothing to tour."):
        super().__init__(msg)


class InvalidStartIdentifier(TourError, KeyError):
    """Requested start id is not present in the point collection."""

    def __init__(self, start_id):
        self.start_id = start_id
        super().__init__(start_id)

    def __str__(self):
        return f"Start id {self.start_id!r} is not in the point collection."
