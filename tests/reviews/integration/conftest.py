import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from reviews.api import review_router
from shared.errors import register_error_handlers


@pytest.fixture()
def client(community):
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(review_router)
    return TestClient(app)
