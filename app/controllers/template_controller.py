"""TemplateController - Loads pre-built circuits from the static catalog.

Each catalog entry wraps a circuit in the standard dict format (components,
wires, source) with a name and description. Loading a template replaces
the whole circuit and its source parameters.
"""

import logging
from typing import Optional

from models.circuit import CircuitModel
from models.component import COMPONENT_TYPES, display_type
from models.source import SOURCE_KINDS
from models.template import PREBUILT_CIRCUITS, CircuitTemplate

logger = logging.getLogger(__name__)


def validate_circuit_data(data: dict) -> None:
    """Validate circuit dict structure before materializing it.

    Raises ValueError with a descriptive message if anything is wrong.
    """
    if not isinstance(data, dict):
        raise ValueError("Circuit data must be an object.")

    components = data.get("components", [])
    if not isinstance(components, list):
        raise ValueError("'components' must be a list.")

    ids = set()
    for i, comp in enumerate(components):
        for key in ("id", "type", "value", "pos"):
            if key not in comp:
                raise ValueError(f"Component {i} is missing '{key}'.")
        comp_type = display_type(comp["type"])
        if comp_type not in COMPONENT_TYPES:
            raise ValueError(f"Component '{comp['id']}' has unknown type '{comp['type']}'.")
        if comp["id"] in ids:
            raise ValueError(f"Duplicate component id '{comp['id']}'.")
        ids.add(comp["id"])

    wires = data.get("wires", [])
    if not isinstance(wires, list):
        raise ValueError("'wires' must be a list.")

    wire_ids = set()
    for i, wire in enumerate(wires):
        for key in ("id", "start_comp", "end_comp"):
            if key not in wire:
                raise ValueError(f"Wire {i} is missing '{key}'.")
        if wire["id"] in wire_ids:
            raise ValueError(f"Duplicate wire id '{wire['id']}'.")
        wire_ids.add(wire["id"])
        for end in ("start_comp", "end_comp"):
            if wire[end] not in ids:
                raise ValueError(f"Wire '{wire['id']}' references unknown component '{wire[end]}'.")

    source = data.get("source")
    if source is not None and source.get("kind", "DC").upper() not in SOURCE_KINDS:
        raise ValueError(f"Unknown source kind '{source.get('kind')}'.")


def validate_template_data(data: dict) -> None:
    """Validate a catalog entry. Raises ValueError if malformed."""
    if not isinstance(data, dict):
        raise ValueError("Template entry must be an object.")
    if not data.get("id"):
        raise ValueError("Template entry must include a non-empty 'id'.")
    if "circuit" not in data:
        raise ValueError(f"Template '{data['id']}' has no 'circuit' section.")
    validate_circuit_data(data["circuit"])


class TemplateController:
    """Serves the pre-built circuit catalog and loads entries into a circuit.

    Works alongside CircuitController: the circuit controller owns the
    model, this controller only builds replacement models from the catalog.
    """

    def __init__(self, circuit_ctrl, catalog: Optional[list[dict]] = None):
        self.circuit_ctrl = circuit_ctrl
        entries = PREBUILT_CIRCUITS if catalog is None else catalog
        for entry in entries:
            validate_template_data(entry)
        self._templates = [CircuitTemplate.from_dict(entry) for entry in entries]

    def list_templates(self) -> list[CircuitTemplate]:
        return list(self._templates)

    def get_template(self, template_id: str) -> Optional[CircuitTemplate]:
        for template in self._templates:
            if template.template_id == template_id:
                return template
        return None

    def build_model(self, template: CircuitTemplate) -> CircuitModel:
        """Materialize a fresh CircuitModel from a template."""
        model = CircuitModel.from_dict(template.circuit)
        model.template_id = template.template_id
        return model

    def load_template(self, template_id: str, speed_scale: Optional[float] = None) -> bool:
        """
        Replace the current circuit with a catalog entry.

        The template's source parameters replace the current ones; pass
        speed_scale to keep the user's slider position.

        Returns:
            True if loaded, False if no template has that ID.
        """
        template = self.get_template(template_id)
        if template is None:
            logger.warning("Unknown circuit template: %s", template_id)
            return False

        model = self.build_model(template)
        if speed_scale is not None:
            model.source = model.source.with_speed_scale(speed_scale)
        self.circuit_ctrl.load_circuit(model)
        logger.info("%s loaded", template.name)
        return True
