"""Script data: the persisted configuration of one batch processing session."""

from typing import Any, Dict, Optional

from batchrvt.domain.exceptions import MalformedContentError, ScriptDataError
from batchrvt.domain.options import (
    CentralFileOpenOption,
    RevitProcessingOption,
    WorksetConfigurationOption,
)
from batchrvt.domain.settings import (
    BooleanSetting,
    EnumSetting,
    IntegerSetting,
    ListSetting,
    PersistentSettings,
    StringSetting,
)
from batchrvt.shared import json_files
from batchrvt.shared.logging import get_logger
from batchrvt.shared.types import JsonObject, PathLike

logger = get_logger(__name__)


class ScriptData:
    """
    Full configuration record for one batch processing session.

    Each field is a setting bound to its JSON key. Fields are read and
    written through ``get_value()`` / ``set_value()``::

        script_data = ScriptData()
        script_data.revit_file_path.set_value(r"C:\\Models\\Tower.rvt")
        script_data.save_to_file(path)
    """

    def __init__(self):
        self.session_id = StringSetting("sessionId")
        self.revit_file_path = StringSetting("revitFilePath")
        self.is_cloud_model = BooleanSetting("isCloudModel")
        self.cloud_project_id = StringSetting("cloudProjectId")
        self.cloud_model_id = StringSetting("cloudModelId")
        self.enable_data_export = BooleanSetting("enableDataExport")
        self.task_script_file_path = StringSetting("taskScriptFilePath")
        self.task_data = StringSetting("taskData")
        self.session_data_folder_path = StringSetting("sessionDataFolderPath")
        self.data_export_folder_path = StringSetting("dataExportFolderPath")
        self.show_message_box_on_task_script_error = BooleanSetting("showMessageBoxOnTaskError")
        self.revit_processing_option = EnumSetting("revitProcessingOption", RevitProcessingOption)
        self.central_file_open_option = EnumSetting("centralFileOpenOption", CentralFileOpenOption)
        self.delete_local_after = BooleanSetting("deleteLocalAfter")
        self.discard_worksets_on_detach = BooleanSetting("discardWorksetsOnDetach")
        self.workset_configuration_option = EnumSetting(
            "worksetConfigurationOption", WorksetConfigurationOption
        )
        self.open_in_ui = BooleanSetting("openInUI")
        self.audit_on_opening = BooleanSetting("auditOnOpening")
        self.progress_number = IntegerSetting("progressNumber")
        self.progress_max = IntegerSetting("progressMax")
        self.associated_data = ListSetting("associatedData")

        # Order here is the key order of the stored JSON object
        self._persistent_settings = PersistentSettings([
            self.session_id,
            self.revit_file_path,
            self.is_cloud_model,
            self.cloud_project_id,
            self.cloud_model_id,
            self.enable_data_export,
            self.task_script_file_path,
            self.task_data,
            self.session_data_folder_path,
            self.data_export_folder_path,
            self.show_message_box_on_task_script_error,
            self.revit_processing_option,
            self.central_file_open_option,
            self.delete_local_after,
            self.discard_worksets_on_detach,
            self.workset_configuration_option,
            self.open_in_ui,
            self.audit_on_opening,
            self.progress_number,
            self.progress_max,
            self.associated_data,
        ])

    @property
    def persistent_settings(self) -> PersistentSettings:
        return self._persistent_settings

    def load(self, json_object: JsonObject) -> None:
        """Load recognized keys from ``json_object``; other keys are ignored."""
        self._persistent_settings.load(json_object)

    def store(self, json_object: JsonObject) -> None:
        """Store every field into ``json_object``, unset fields as ``null``."""
        self._persistent_settings.store(json_object)

    def as_dict(self) -> Dict[str, Any]:
        json_object: JsonObject = {}
        self.store(json_object)
        return json_object

    def read_from_file(self, file_path: PathLike) -> None:
        """
        Load this record from a script-data file.

        Raises:
            ScriptDataNotFoundError: If the file does not exist
            MalformedContentError: If the file is not a JSON object
            StorageIOError: If the file cannot be read
        """
        self.load(json_files.read_json_object(file_path))

    def write_to_file(self, file_path: PathLike) -> None:
        """
        Write this record to a script-data file, creating parent directories.

        Raises:
            MalformedContentError: If a field value cannot be serialized
            StorageIOError: If the file cannot be written
        """
        json_files.write_json_document(file_path, self.as_dict())

    def load_from_file(self, file_path: PathLike) -> bool:
        """
        Load this record from a script-data file.

        Returns:
            True on success; False if the file is missing or unreadable.
            A failed load may leave fields partially updated.
        """
        try:
            self.read_from_file(file_path)
        except ScriptDataError as e:
            logger.debug(f"Could not load script data from {file_path}: {e}")
            return False
        return True

    def save_to_file(self, file_path: PathLike) -> bool:
        """
        Save this record to a script-data file, overwriting it.

        Returns:
            True on success, False if anything failed
        """
        try:
            self.write_to_file(file_path)
        except ScriptDataError as e:
            logger.warning(f"Could not save script data to {file_path}: {e}")
            return False
        return True

    def to_json_string(self) -> str:
        return json_files.serialize_json(self.as_dict())

    @classmethod
    def parse_json_string(cls, script_data_json: str) -> "ScriptData":
        """
        Build a record from JSON text.

        Raises:
            MalformedContentError: If the text is not a JSON object
        """
        json_object = json_files.parse_json(script_data_json)
        if not isinstance(json_object, dict):
            raise MalformedContentError(
                f"Expected a JSON object, got {type(json_object).__name__}"
            )

        script_data = cls()
        script_data.load(json_object)
        return script_data

    @classmethod
    def from_json_string(cls, script_data_json: str) -> Optional["ScriptData"]:
        """Build a record from JSON text, or return None if it cannot be parsed."""
        try:
            return cls.parse_json_string(script_data_json)
        except ScriptDataError as e:
            logger.debug(f"Could not parse script data JSON: {e}")
            return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScriptData):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None

    def __repr__(self) -> str:
        set_fields = {
            setting.key: setting.get_value()
            for setting in self._persistent_settings
            if setting.is_set()
        }
        return f"ScriptData({set_fields!r})"
