import pytest

from car_rental import CarRentalSystemFactory


@pytest.fixture
def service():
    """Service seeded with Camry (1), CR-V (2) and F-150 (3)"""
    return CarRentalSystemFactory.create_default_system()


@pytest.fixture
def alice(service):
    assert service.register("Alice", "alice", "pw1")
    return service.login_customer("alice", "pw1").get_value()


@pytest.fixture
def admin(service):
    return service.login_admin("admin", "admin123").get_value()
