from __future__ import annotations


class SaveLookupError(Exception):
    pass


class SaveIOError(SaveLookupError):
    pass


class NoSaveFoldersError(SaveLookupError):
    pass
