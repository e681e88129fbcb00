# unity_bootstrap/services: filesystem side of folder generation
# FolderCreator is the only writer of folders; file_generator only writes files.
from unity_bootstrap.services.folder_creator import FolderCreator, GenerationResult

__all__ = ["FolderCreator", "GenerationResult"]
