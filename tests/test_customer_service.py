import pytest

from storefront.common.errors import ConflictError, NotFoundError, ValidationError
from storefront.common.models import Customer
from storefront.common.services import AddressUpdate, CustomerService, ProfileUpdate


@pytest.fixture()
def customers(session_factory):
    return CustomerService(session_factory)


@pytest.fixture()
def registered(customers):
    return customers.register(name="Romil", email="Romil@Example.com", password="secret")


class TestRegistration:
    def test_register(self, registered, session_factory):
        assert registered["customer_id"] > 0
        assert registered["email"] == "romil@example.com"
        assert "password" not in registered
        with session_factory() as session:
            stored = session.get(Customer, registered["customer_id"])
            assert stored.password != "secret"

    def test_duplicate_email(self, customers, registered):
        with pytest.raises(ConflictError) as exc:
            customers.register(name="Other", email="romil@example.com", password="x")
        assert exc.value.code == "USR_04"

    def test_duplicate_email_written_concurrently(self, customers, registered, monkeypatch):
        # the other request inserted the email after this one checked for it
        monkeypatch.setattr(customers, "_email_taken", lambda *args, **kwargs: False)
        with pytest.raises(ConflictError) as exc:
            customers.register(name="Other", email="romil@example.com", password="x")
        assert exc.value.code == "USR_04"


class TestLogin:
    def test_login(self, customers, registered):
        assert customers.login(email="ROMIL@example.com", password="secret")["customer_id"] == registered["customer_id"]

    @pytest.mark.parametrize("email, password", [("romil@example.com", "wrong"), ("nobody@example.com", "secret")])
    def test_bad_credentials(self, customers, registered, email, password):
        with pytest.raises(ValidationError) as exc:
            customers.login(email=email, password=password)
        assert exc.value.code == "USR_01"


class TestProfile:
    def test_get_profile(self, customers, registered):
        assert customers.get_profile(registered["customer_id"])["name"] == "Romil"
        with pytest.raises(NotFoundError):
            customers.get_profile(999)

    def test_update_profile_and_password(self, customers, registered):
        cid = registered["customer_id"]
        updated = customers.update_profile(
            cid, ProfileUpdate(name="Romil K", email="romil@example.com", password="newpass", day_phone="555-123-4567")
        )
        assert updated["name"] == "Romil K"
        assert updated["day_phone"] == "555-123-4567"
        assert customers.login(email="romil@example.com", password="newpass")["customer_id"] == cid

    def test_update_profile_to_taken_email(self, customers, registered):
        customers.register(name="Other", email="other@example.com", password="x")
        with pytest.raises(ConflictError):
            customers.update_profile(registered["customer_id"], ProfileUpdate(name="R", email="other@example.com"))

    def test_update_address(self, customers, registered):
        update = AddressUpdate(
            address_1="123 Main St", city="Toronto", region="Ontario", postal_code="M5V", country="Canada", shipping_region_id=2
        )
        result = customers.update_address(registered["customer_id"], update)
        assert result["city"] == "Toronto"
        assert result["shipping_region_id"] == 2

    def test_update_address_unknown_region(self, customers, registered):
        update = AddressUpdate(
            address_1="123 Main St", city="Toronto", region="Ontario", postal_code="M5V", country="Canada", shipping_region_id=42
        )
        with pytest.raises(NotFoundError):
            customers.update_address(registered["customer_id"], update)

    def test_credit_card_is_masked(self, customers, registered):
        result = customers.update_credit_card(registered["customer_id"], "4242 4242 4242 4242")
        assert result["credit_card"] == "XXXXXXXX4242"

    def test_invalid_credit_card(self, customers, registered):
        with pytest.raises(ValidationError):
            customers.update_credit_card(registered["customer_id"], "not-a-card")
