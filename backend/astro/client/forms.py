"""
New-service form.

The form's values live in its modal's `data`, so a tucked form keeps what
was typed. Submitting validates every field, uploads the picked logo (if
any), creates the service and closes the modal.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from astro.client.fetcher import ApiClient
from astro.client.modals import ModalIdentity
from astro.client.stores import ConfigStore, UIStore
from astro.exceptions import ApiError
from astro.sample_data import PLACEHOLDER_LOGO
from astro.validation import service_field_errors

logger = logging.getLogger(__name__)

NEW_SERVICE_MODAL_ID = "new-service"

BASE_FORM_STATE: Dict[str, Any] = {
    "name": "",
    "description": "",
    "target": True,
    "url": "",
    "category": "",
    "logo": PLACEHOLDER_LOGO,
}


def build_service_payload(values: Dict[str, Any], logo: str) -> Dict[str, Any]:
    """Form values → POST /api/service body. `target=True` opens a new tab."""
    category = values.get("category")
    return {
        "name": values["name"].strip(),
        "description": (values.get("description") or "").strip() or None,
        "url": values["url"].strip(),
        "target": "_blank" if values.get("target") else "",
        "logo": logo,
        "category": int(category) if category not in (None, "") else None,
    }


def _insert_provisional(config: Dict[str, Any], payload: Dict[str, Any]) -> None:
    """Show the new tile under its category until the resync replaces it."""
    for category in config.get("categories", []):
        if category.get("id") == payload["category"]:
            category.setdefault("services", []).append(
                {**payload, "id": None, "tags": [], "category": None}
            )
            return


class NewServiceForm:
    def __init__(
        self,
        client: ApiClient,
        config: ConfigStore,
        ui: UIStore,
        modal_id: str = NEW_SERVICE_MODAL_ID,
    ):
        self.client = client
        self.config = config
        self.ui = ui
        self.modal_id = modal_id
        self.errors: Dict[str, str] = {}
        self._picked_logo: Optional[Tuple[str, bytes]] = None

    def open(self) -> ModalIdentity:
        """Open (or re-expand) the form; a fresh open starts from the base state."""
        existing = self.ui.get_modal(self.modal_id)
        data = None if existing is not None else dict(BASE_FORM_STATE)
        return self.ui.open_modal(self.modal_id, data=data, collapsable=True)

    @property
    def values(self) -> Dict[str, Any]:
        modal = self.ui.get_modal(self.modal_id)
        return dict(modal.data) if modal else dict(BASE_FORM_STATE)

    def change(self, field: str, value: Any) -> None:
        if field not in BASE_FORM_STATE:
            raise KeyError(field)
        self.ui.update_modal_data(self.modal_id, **{field: value})
        self.errors.pop(field, None)

    def pick_logo(self, filename: str, content: bytes) -> None:
        """Hold a logo to upload on submit; the form shows its file name."""
        self._picked_logo = (filename, content)
        self.ui.update_modal_data(self.modal_id, logo=filename)

    def validate(self) -> Dict[str, str]:
        self.errors = service_field_errors(
            self.values, known_categories=self.config.category_ids()
        )
        return self.errors

    async def submit(self) -> Optional[Dict[str, Any]]:
        """
        Create the service.

        Returns:
            The created service, or None when validation failed (see
            `errors`). Other API failures propagate as ApiError.
        """
        if self.validate():
            return None

        values = self.values
        logo = values.get("logo") or PLACEHOLDER_LOGO
        if self._picked_logo is not None:
            filename, content = self._picked_logo
            logo = await self.client.upload_logo(filename, content)
            self.ui.update_modal_data(self.modal_id, logo=logo)
            self._picked_logo = None

        payload = build_service_payload(values, logo)
        try:
            created = await self.config.mutate(
                lambda config: _insert_provisional(config, payload),
                lambda: self.client.fetch(["Service"], data=payload),
            )
        except ApiError as e:
            if e.status_code == 400 and e.field_errors:
                self.errors = e.field_errors
                return None
            raise

        logger.info("Created service '%s'", payload["name"])
        self.errors = {}
        self.ui.close_modal(self.modal_id)
        return created
