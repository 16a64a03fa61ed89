import os

os.environ.setdefault("EMAILJS_PUBLIC_KEY", "test-public-key")
os.environ.setdefault("EMAILJS_SERVICE_ID", "service_test")
os.environ.setdefault("EMAILJS_TEMPLATE_ID", "template_test")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from kitchen_site.main import app
from kitchen_site.tests.fixtures.contact import *
from kitchen_site.tests.fixtures.sms import *


@pytest_asyncio.fixture(scope="function", loop_scope="function")
async def client():
    """Fixture providing a TestClient for the website."""
    with TestClient(app) as c:
        yield c

    # Clean up overrides after the test finished
    app.dependency_overrides.clear()
