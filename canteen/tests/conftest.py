"""
Test fixtures - fresh in-memory selection store + HTTP client
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from canteen.main import app
from canteen.services.selection_store import SelectionStore, get_selection_store


@pytest.fixture()
def store():
    """Create an empty selection store for each test"""
    return SelectionStore()


@pytest.fixture()
def asha_entry():
    return {
        "employee": "Asha",
        "department": "Design",
        "shift": "general",
        "date": "2024-05-01",
        "meals": {"breakfast": True, "lunch": False, "dinner": True},
    }


@pytest_asyncio.fixture()
async def client(store):
    """httpx AsyncClient bound to the FastAPI app, using the test store"""

    app.dependency_overrides[get_selection_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=True) as ac:
        yield ac

    app.dependency_overrides.clear()
