"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .content_list_parser import (
    ContentListRequestError,
    ContentListRequestParser,
    MalformedRequestError,
)
from .diff_generator import DiffGenerator
from .diff_manager import DiffManager
from .file_type_registry import FileTypeRegistry
from .language_level import LanguageLevelConfigurable, LanguageLevelModuleExtension, ModuleRegistry
from .project_manager import Project, ProjectManager
from .ui_task_queue import UITaskQueue

__all__ = [
    "ConfigManager",
    "ContentListRequestError",
    "ContentListRequestParser",
    "MalformedRequestError",
    "DiffGenerator",
    "DiffManager",
    "FileTypeRegistry",
    "LanguageLevelConfigurable",
    "LanguageLevelModuleExtension",
    "ModuleRegistry",
    "Project",
    "ProjectManager",
    "UITaskQueue",
]
