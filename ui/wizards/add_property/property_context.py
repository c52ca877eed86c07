# -*- coding: utf-8 -*-
"""
Property Context - State for the Add Property wizard.

Single owner of the PropertyDraft. Field edits go through set_field();
unit/plan edits delegate to UnitPlanEditor and image edits to
ImageUploadManager, all landing on the same draft.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.property_draft import PropertyDraft
from services.wizard.image_manager import ImageUploadManager, ImagePreview, PathLike
from services.wizard.unit_editor import UnitPlanEditor
from ui.wizards.framework import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyWizardContext(WizardContext):
    """Context for the Add Property wizard."""

    def __init__(self, image_manager: ImageUploadManager = None):
        super().__init__()
        self.draft: PropertyDraft = PropertyDraft()
        self.image_manager = image_manager or ImageUploadManager()
        self.property_id: Optional[str] = None

    def _get_reference_prefix(self) -> str:
        return "LST"

    # =========================================================================
    # Form fields
    # =========================================================================

    def set_field(self, key: str, value: Any):
        """
        Replace one PropertyDraft attribute; all others are left untouched.

        Setting "images" swaps the whole image list, releasing the old
        previews and creating new ones. Setting "units" keeps the
        one-unit, one-plan-per-unit minimum.
        """
        self.ensure_editable()
        if key == "images":
            self._replace_images(value)
            return
        if key == "units":
            self.draft = UnitPlanEditor.replace_units(self.draft, value)
        else:
            self.draft = self.draft.with_field(key, value)
        self.touch()

    # =========================================================================
    # Images
    # =========================================================================

    @property
    def previews(self) -> Tuple[ImagePreview, ...]:
        return self.image_manager.previews

    def add_images(self, files: Iterable[PathLike]) -> List[ImagePreview]:
        self.ensure_editable()
        added = self.image_manager.add_images(files)
        self._sync_images()
        return added

    def remove_image(self, index: int):
        self.ensure_editable()
        self.image_manager.remove_image(index)
        self._sync_images()

    def _replace_images(self, files: Iterable[PathLike]):
        files = list(files)
        for index in reversed(range(len(self.image_manager))):
            self.image_manager.remove_image(index)
        self.image_manager.add_images(files)
        self._sync_images()

    def _sync_images(self):
        self.draft = self.draft.with_field("images", self.image_manager.files)
        self.touch()

    # =========================================================================
    # Units and pricing plans
    # =========================================================================

    def add_unit(self):
        self._apply(UnitPlanEditor.add_unit)

    def remove_unit(self, index: int):
        self._apply(UnitPlanEditor.remove_unit, index)

    def update_unit(self, index: int, field_key: str, value: Any):
        self._apply(UnitPlanEditor.update_unit, index, field_key, value)

    def add_plan(self, unit_index: int):
        self._apply(UnitPlanEditor.add_plan, unit_index)

    def remove_plan(self, unit_index: int, plan_index: int):
        self._apply(UnitPlanEditor.remove_plan, unit_index, plan_index)

    def update_plan(self, unit_index: int, plan_index: int, field_key: str, value: Any):
        self._apply(UnitPlanEditor.update_plan, unit_index, plan_index, field_key, value)

    def _apply(self, operation, *args):
        self.ensure_editable()
        self.draft = operation(self.draft, *args)
        self.touch()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def complete(self, property_id: str):
        """The draft was accepted by the backend; it is consumed."""
        self.property_id = property_id
        self.mark_completed()
        self.image_manager.release_all()
        logger.info(f"Wizard {self.reference_number} completed as property {property_id}")

    def discard(self):
        """Drop the draft (cancel or window teardown) and release previews."""
        if self.is_editable:
            self.mark_discarded()
            logger.info(f"Wizard {self.reference_number} discarded")
        self.image_manager.release_all()

    def has_user_input(self) -> bool:
        """True when the draft differs from a fresh one."""
        return self.draft != PropertyDraft()

    # =========================================================================
    # Summary / serialization
    # =========================================================================

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the draft for review and confirmation."""
        draft = self.draft
        image_count = len(draft.images)
        unit_count = len(draft.units)
        return {
            "reference_number": self.reference_number,
            "title": draft.title,
            "type": draft.property_type.label,
            "address": draft.address,
            "city": draft.city,
            "description": draft.description,
            "images": f"{image_count} photo{'s' if image_count != 1 else ''}",
            "units_label": f"{unit_count} unit{'s' if unit_count != 1 else ''}",
            "unit_count": unit_count,
            "plan_count": draft.plan_count,
            "units": [
                {
                    "name": unit.display_name(i),
                    "max_guests": unit.max_guests,
                    "plans": [plan.display_label for plan in unit.pricing_plans],
                }
                for i, unit in enumerate(draft.units)
            ],
            "status": self.status,
        }

    def to_dict(self) -> Dict[str, Any]:
        base_data = super().to_dict()
        base_data["draft"] = self.draft.to_dict()
        base_data["property_id"] = self.property_id
        return base_data

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  image_manager: ImageUploadManager = None) -> 'PropertyWizardContext':
        """Restore context from dictionary; previews are regenerated."""
        ctx = cls(image_manager=image_manager)
        cls._restore_base_fields(ctx, data)
        ctx.property_id = data.get("property_id")

        draft = PropertyDraft.from_dict(data.get("draft", {}))
        ctx.image_manager.add_images(draft.images)
        ctx.draft = draft
        return ctx
