# -*- coding: utf-8 -*-
"""
Vehicle Inspection Step - assign the inspector.
"""

from services.wizard.contract import INSPECTORS
from ui.wizards.framework import BaseStep


class InspectionStep(BaseStep):
    """Step 5: the inspector list comes from the inspectors endpoint."""

    def setup_ui(self):
        self.add_choice("selectedInspector", "field.inspector", source=INSPECTORS)
        self.add_text("inspectorName", "field.inspector_name", read_only=True)
