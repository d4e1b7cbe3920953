from .temp_files import TempFileStore

__all__ = ["TempFileStore"]
