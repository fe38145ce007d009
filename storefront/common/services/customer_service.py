from dataclasses import dataclass
from typing import Dict, Optional
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash
from ..db.session import get_session, translate_errors
from ..errors import ConflictError, NotFoundError, ValidationError
from ..models.customer import Customer
from ..models.shipping import ShippingRegion
from ..utils.dto import to_customer_dto
from .logging import log_event


@dataclass(frozen=True)
class ProfileUpdate:
    name: str
    email: str
    password: Optional[str] = None
    day_phone: Optional[str] = None
    eve_phone: Optional[str] = None
    mob_phone: Optional[str] = None


@dataclass(frozen=True)
class AddressUpdate:
    address_1: str
    city: str
    region: str
    postal_code: str
    country: str
    shipping_region_id: int
    address_2: Optional[str] = None


class CustomerService:
    """Customer accounts: registration, login and profile maintenance."""

    def __init__(self, session_factory=get_session):
        self._session_factory = session_factory

    @staticmethod
    def _normalize_email(email: str) -> str:
        return email.strip().lower()

    def _load(self, session, customer_id: int) -> Customer:
        customer = session.get(Customer, customer_id)
        if not customer:
            raise NotFoundError("Customer does not exist", code="USR_05", field="customer_id")
        return customer

    def _email_taken(self, session, email: str, exclude_id: Optional[int] = None) -> bool:
        q = session.query(Customer.customer_id).filter(Customer.email == email)
        if exclude_id is not None:
            q = q.filter(Customer.customer_id != exclude_id)
        return q.first() is not None

    @staticmethod
    def _flush_unique_email(session) -> None:
        # a concurrent writer can claim the email between the check and the insert
        try:
            session.flush()
        except IntegrityError:
            raise ConflictError("The email already exists", code="USR_04", field="email") from None

    def register(self, *, name: str, email: str, password: str) -> Dict:
        email = self._normalize_email(email)
        with translate_errors("customer.register"), self._session_factory() as session:
            if self._email_taken(session, email):
                raise ConflictError("The email already exists", code="USR_04", field="email")
            customer = Customer(name=name, email=email, password=generate_password_hash(password))
            session.add(customer)
            self._flush_unique_email(session)
            result = to_customer_dto(customer)
        log_event("info", "customer.registered", customer_id=result["customer_id"])
        return result

    def login(self, *, email: str, password: str) -> Dict:
        email = self._normalize_email(email)
        with translate_errors("customer.login"), self._session_factory() as session:
            customer = session.query(Customer).filter(Customer.email == email).first()
            if not customer or not check_password_hash(customer.password, password):
                log_event("info", "customer.login_failed")
                raise ValidationError("Email or Password is invalid", code="USR_01", field="email")
            return to_customer_dto(customer)

    def get_profile(self, customer_id: int) -> Dict:
        with translate_errors("customer.get_profile"), self._session_factory() as session:
            return to_customer_dto(self._load(session, customer_id))

    def update_profile(self, customer_id: int, update: ProfileUpdate) -> Dict:
        email = self._normalize_email(update.email)
        with translate_errors("customer.update_profile"), self._session_factory() as session:
            customer = self._load(session, customer_id)
            if self._email_taken(session, email, exclude_id=customer_id):
                raise ConflictError("The email already exists", code="USR_04", field="email")
            customer.name = update.name
            customer.email = email
            if update.password:
                customer.password = generate_password_hash(update.password)
            customer.day_phone = update.day_phone
            customer.eve_phone = update.eve_phone
            customer.mob_phone = update.mob_phone
            self._flush_unique_email(session)
            return to_customer_dto(customer)

    def update_address(self, customer_id: int, update: AddressUpdate) -> Dict:
        with translate_errors("customer.update_address"), self._session_factory() as session:
            customer = self._load(session, customer_id)
            if session.get(ShippingRegion, update.shipping_region_id) is None:
                raise NotFoundError(
                    f"Shipping region {update.shipping_region_id} does not exist",
                    code="SHP_01",
                    field="shipping_region_id",
                )
            customer.address_1 = update.address_1
            customer.address_2 = update.address_2
            customer.city = update.city
            customer.region = update.region
            customer.postal_code = update.postal_code
            customer.country = update.country
            customer.shipping_region_id = update.shipping_region_id
            session.flush()
            return to_customer_dto(customer)

    def update_credit_card(self, customer_id: int, credit_card: str) -> Dict:
        digits = credit_card.replace(" ", "").replace("-", "")
        if not digits.isdigit() or not 12 <= len(digits) <= 19:
            raise ValidationError("This is an invalid Credit Card", code="USR_08", field="credit_card")
        with translate_errors("customer.update_credit_card"), self._session_factory() as session:
            customer = self._load(session, customer_id)
            customer.credit_card = digits
            session.flush()
            return to_customer_dto(customer)
