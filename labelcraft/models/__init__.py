from labelcraft.models.folder import Folder
from labelcraft.models.label import Label
from labelcraft.models.template import Template

__all__ = ["Folder", "Label", "Template"]
