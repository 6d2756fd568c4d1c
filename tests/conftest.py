import pytest
from demo_app.app import create_app

@pytest.fixture
def client():
    return create_app("laravel").test_client()

@pytest.fixture
def springboot_client():
    return create_app("springboot").test_client()
