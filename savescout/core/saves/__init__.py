from core.saves.errors import NoSaveFoldersError, SaveIOError, SaveLookupError
from core.saves.models import SaveFolder, SaveLocation, SaveLocationSource
from core.saves.naming import format_save_folder_name, save_path_instructions, validate_save_path
from core.saves.resolver import SaveDirectoryResolver, format_timestamp
from core.saves.watch import start_watching

__all__ = [
    "NoSaveFoldersError",
    "SaveDirectoryResolver",
    "SaveFolder",
    "SaveIOError",
    "SaveLocation",
    "SaveLocationSource",
    "SaveLookupError",
    "format_save_folder_name",
    "format_timestamp",
    "save_path_instructions",
    "start_watching",
    "validate_save_path",
]
