"""
Pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.architecture import mock_architecture


@pytest.fixture
def client():
    """Test client bound to the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def pdf_upload():
    """Multipart payload carrying a tiny PDF in the archDrawing field."""
    return {"archDrawing": ("tower-block.pdf", b"%PDF-1.4\n%%EOF\n", "application/pdf")}


@pytest.fixture
def architecture_payload():
    """Wire form of the mock architecture, as the page sends it back."""
    return mock_architecture("tower-block.pdf").model_dump(by_alias=True)


@pytest.fixture
def site_inputs_payload():
    return {
        "soilType": "C (dense sand)",
        "windZone": "Zone 2",
        "seismicZone": "ag = 0.06g",
        "importanceClass": "II",
        "nationalAnnex": "Irish NA",
        "imposedUseCategory": "Office (Category B)",
    }
