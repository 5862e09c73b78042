from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple
from dataclasses import dataclass, field
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP
import argparse
import logging
import uuid


logger = logging.getLogger(__name__)


# ==================== Enums ====================

class VehicleCategory(Enum):
    """Closed set of vehicle categories"""
    SEDAN = "Sedan"
    SUV = "SUV"
    TRUCK = "Truck"

    @classmethod
    def parse(cls, value: Any) -> Optional['VehicleCategory']:
        """Exact, case-sensitive lookup by display name"""
        if isinstance(value, VehicleCategory):
            return value
        for category in cls:
            if category.value == value:
                return category
        return None


class SessionRole(Enum):
    """Who owns the active session"""
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


class RentalError(Enum):
    """Recoverable failures reported back to the caller"""
    DUPLICATE_USERNAME = "Username already taken. Please choose a different username."
    INVALID_CREDENTIALS = "Invalid username or password!"
    USER_NOT_FOUND = "Username not found!"
    OUT_OF_RANGE = "Invalid vehicle selection!"
    ALREADY_RENTED = "Vehicle is already rented!"
    INVALID_DURATION = "Invalid number of days!"
    NOT_RENTED = "This vehicle is not currently rented."
    NOT_YOUR_RENTAL = "You have not rented this vehicle!"
    NOT_AUTHENTICATED = "No user is currently logged in."
    UNKNOWN_VEHICLE_CATEGORY = "Invalid vehicle type!"
    INVALID_PRICE = "Price per day must be a positive amount!"
    PERMISSION_DENIED = "Admin login required."


# ==================== Results ====================

class Result:
    """Outcome of a rental operation: a value on success, an error kind on failure"""

    def __init__(self, value: Any = None, error: Optional[RentalError] = None,
                 message: Optional[str] = None):
        self._value = value
        self._error = error
        self._message = message

    @classmethod
    def ok(cls, value: Any = None) -> 'Result':
        return cls(value=value)

    @classmethod
    def fail(cls, error: RentalError, message: Optional[str] = None) -> 'Result':
        return cls(error=error, message=message)

    def is_success(self) -> bool:
        return self._error is None

    def get_value(self) -> Any:
        return self._value

    def get_error(self) -> Optional[RentalError]:
        return self._error

    def get_message(self) -> str:
        if self._message:
            return self._message
        return self._error.value if self._error else ""

    def __bool__(self) -> bool:
        return self.is_success()

    def __repr__(self) -> str:
        if self.is_success():
            return f"Result(ok, {self._value!r})"
        return f"Result({self._error.name}, {self.get_message()!r})"


# ==================== Money ====================

CENTS = Decimal('0.01')
MAX_PRICE_PER_DAY = Decimal('1000000')

# Wide enough for any capped price times any rental length
MONEY_CONTEXT = Context(prec=50, rounding=ROUND_HALF_UP)


def to_money(amount: Any) -> Optional[Decimal]:
    """Parse an amount into a 2-place Decimal, or None if it is not a finite number"""
    if isinstance(amount, bool):
        return None
    try:
        value = Decimal(str(amount).strip())
        if not value.is_finite():
            return None
        return value.quantize(CENTS, context=MONEY_CONTEXT)
    except (InvalidOperation, ValueError):
        return None


def format_money(amount: Decimal, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{amount:.2f}"


# ==================== Core Models ====================

class Vehicle:
    """A catalog vehicle; only the availability flag changes after creation"""

    def __init__(self, vehicle_id: int, category: VehicleCategory, brand: str,
                 model: str, price_per_day: Decimal):
        self._vehicle_id = vehicle_id
        self._category = category
        self._brand = brand
        self._model = model
        self._price_per_day = price_per_day
        self._available = True

    def get_id(self) -> int:
        return self._vehicle_id

    def get_category(self) -> VehicleCategory:
        return self._category

    def get_brand(self) -> str:
        return self._brand

    def get_model(self) -> str:
        return self._model

    def get_price_per_day(self) -> Decimal:
        return self._price_per_day

    def is_available(self) -> bool:
        return self._available

    def set_available(self, available: bool) -> None:
        self._available = available

    def __repr__(self) -> str:
        return (f"Vehicle({self._vehicle_id}, {self._category.value}, "
                f"{self._brand} {self._model}, {self._price_per_day})")

    def __hash__(self) -> int:
        return hash(self._vehicle_id)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vehicle):
            return False
        return self._vehicle_id == other._vehicle_id


@dataclass(frozen=True)
class Booking:
    """Immutable record of one completed rental; price fields are snapshots"""
    booking_id: str
    vehicle_id: int
    category: VehicleCategory
    brand: str
    model: str
    days: int
    price_per_day: Decimal
    total_cost: Decimal


@dataclass(frozen=True)
class Feedback:
    username: str
    comment: str


class Customer:
    """Registered customer with rental history and currently held vehicles"""

    def __init__(self, name: str, username: str, password: str):
        self._name = name
        self._username = username
        self._password = password
        self._booking_history: List[Booking] = []
        self._rented_vehicle_ids: Set[int] = set()

    def get_name(self) -> str:
        return self._name

    def get_username(self) -> str:
        return self._username

    def check_password(self, password: str) -> bool:
        return self._password == password

    def set_password(self, password: str) -> None:
        self._password = password

    def record_booking(self, booking: Booking) -> None:
        self._booking_history.append(booking)

    def add_rented_vehicle(self, vehicle_id: int) -> None:
        self._rented_vehicle_ids.add(vehicle_id)

    def remove_rented_vehicle(self, vehicle_id: int) -> bool:
        """Returns False when the vehicle was not held by this customer"""
        if vehicle_id not in self._rented_vehicle_ids:
            return False
        self._rented_vehicle_ids.remove(vehicle_id)
        return True

    def is_renting(self, vehicle_id: int) -> bool:
        return vehicle_id in self._rented_vehicle_ids

    def history(self) -> List[Booking]:
        return list(self._booking_history)

    def get_rented_vehicle_ids(self) -> List[int]:
        return sorted(self._rented_vehicle_ids)

    def __repr__(self) -> str:
        return f"Customer({self._username}, {self._name})"


@dataclass(frozen=True)
class Session:
    """Login context handed back by the service and passed into every session call"""
    token: str
    role: SessionRole
    username: str


# ==================== Formatting ====================

def format_vehicle(vehicle: Vehicle, currency_symbol: str = "$") -> str:
    """One listing line, prefixed by the category label"""
    category = vehicle.get_category()
    if category == VehicleCategory.SEDAN:
        label = "Sedan: "
    elif category == VehicleCategory.SUV:
        label = "SUV:   "
    else:
        label = "Truck: "
    status = "(Available)" if vehicle.is_available() else "(Rented)"
    price = format_money(vehicle.get_price_per_day(), currency_symbol)
    return f"{label}{vehicle.get_brand()} {vehicle.get_model()} - {price} per day {status}"


def render_vehicle_listing(title: str, entries: List[Tuple[int, Vehicle]],
                           empty_message: str, currency_symbol: str = "$") -> str:
    header = f"----- {title} -----"
    lines = [header]
    if not entries:
        lines.append(empty_message)
    for index, vehicle in entries:
        lines.append(f"{index}. {format_vehicle(vehicle, currency_symbol)}")
    lines.append("-" * len(header))
    return "\n".join(lines)


def render_receipt(booking: Booking, customer_name: str, currency_symbol: str = "$") -> str:
    """Fixed-layout bill receipt; availability is intentionally not shown"""
    return "\n".join([
        "--------------- Bill Receipt ---------------",
        f"Customer: {customer_name}",
        f"Vehicle: {booking.brand} {booking.model}",
        f"Days: {booking.days}",
        f"Price per day: {format_money(booking.price_per_day, currency_symbol)}",
        f"Total Cost: {format_money(booking.total_cost, currency_symbol)}",
        "--------------------------------------------",
    ])


def render_history(customer_name: str, bookings: List[Booking],
                   currency_symbol: str = "$") -> str:
    if not bookings:
        return "No booking history available."
    lines = [f"----- Booking History for {customer_name} -----"]
    for booking in bookings:
        lines.append(render_receipt(booking, customer_name, currency_symbol))
    lines.append("---------------------------------------")
    return "\n".join(lines)


def render_feedback(entries: List[Feedback]) -> str:
    lines = ["----- Customer Feedback -----"]
    if not entries:
        lines.append("No feedback has been submitted yet.")
    for entry in entries:
        lines.append(f"{entry.username}: {entry.comment}")
    lines.append("-----------------------------")
    return "\n".join(lines)


# ==================== Vehicle Catalog ====================

class VehicleCatalog:
    """Ordered, grow-only vehicle store addressed by 1-based position"""

    def __init__(self, max_price_per_day: Decimal = MAX_PRICE_PER_DAY):
        self._vehicles: List[Vehicle] = []
        self._max_price_per_day = max_price_per_day

    def add_vehicle(self, category: Any, brand: str, model: str, price_per_day: Any) -> Result:
        vehicle_category = VehicleCategory.parse(category)
        if vehicle_category is None:
            return Result.fail(RentalError.UNKNOWN_VEHICLE_CATEGORY)

        price = to_money(price_per_day)
        if price is None or price <= 0:
            return Result.fail(RentalError.INVALID_PRICE)
        if price > self._max_price_per_day:
            return Result.fail(
                RentalError.INVALID_PRICE,
                f"Price per day cannot exceed {format_money(self._max_price_per_day)}!"
            )

        # Positions never shift, so the id doubles as the listing index
        vehicle = Vehicle(len(self._vehicles) + 1, vehicle_category, brand, model, price)
        self._vehicles.append(vehicle)
        return Result.ok(vehicle)

    def list_all(self) -> List[Tuple[int, Vehicle]]:
        return [(index, vehicle) for index, vehicle in enumerate(self._vehicles, start=1)]

    def list_available(self) -> List[Tuple[int, Vehicle]]:
        """Available vehicles, keeping their positions in the full listing"""
        return [(index, vehicle) for index, vehicle in self.list_all() if vehicle.is_available()]

    def get(self, index: Any) -> Result:
        if isinstance(index, bool) or not isinstance(index, int):
            return Result.fail(RentalError.OUT_OF_RANGE)
        if index < 1 or index > len(self._vehicles):
            return Result.fail(RentalError.OUT_OF_RANGE)
        return Result.ok(self._vehicles[index - 1])

    def set_availability(self, index: int, available: bool) -> Result:
        result = self.get(index)
        if result:
            result.get_value().set_available(available)
        return result

    def __len__(self) -> int:
        return len(self._vehicles)


# ==================== Booking Ledger ====================

class BookingLedger:
    """Creates bookings and renders receipts"""

    def __init__(self, min_days: int = 1, max_days: int = 30, currency_symbol: str = "$"):
        self._min_days = min_days
        self._max_days = max_days
        self._currency_symbol = currency_symbol
        self._booking_counter = 0

    def is_valid_duration(self, days: Any) -> bool:
        if isinstance(days, bool) or not isinstance(days, int):
            return False
        return self._min_days <= days <= self._max_days

    def duration_error(self) -> Result:
        return Result.fail(
            RentalError.INVALID_DURATION,
            f"Invalid number of days! Please enter between {self._min_days} and {self._max_days}."
        )

    def create_booking(self, vehicle: Vehicle, days: Any) -> Result:
        if not self.is_valid_duration(days):
            return self.duration_error()

        price = vehicle.get_price_per_day()
        try:
            total_cost = MONEY_CONTEXT.multiply(price, Decimal(days)).quantize(
                CENTS, context=MONEY_CONTEXT)
        except InvalidOperation:
            return Result.fail(RentalError.INVALID_PRICE,
                               f"Total cost for {days} days is out of range.")

        self._booking_counter += 1
        booking = Booking(
            booking_id=f"BK-{self._booking_counter:08d}",
            vehicle_id=vehicle.get_id(),
            category=vehicle.get_category(),
            brand=vehicle.get_brand(),
            model=vehicle.get_model(),
            days=days,
            price_per_day=price,
            total_cost=total_cost,
        )
        return Result.ok(booking)

    def render_receipt(self, booking: Booking, customer_name: str) -> str:
        return render_receipt(booking, customer_name, self._currency_symbol)


# ==================== Customer Directory ====================

class CustomerDirectory:
    """Customers keyed by username, kept in registration order"""

    def __init__(self):
        self._customers: List[Customer] = []

    def register(self, name: str, username: str, password: str) -> Result:
        if not username or not username.strip():
            return Result.fail(RentalError.INVALID_CREDENTIALS, "Username must not be empty.")
        if self.find(username) is not None:
            return Result.fail(RentalError.DUPLICATE_USERNAME)
        customer = Customer(name, username, password)
        self._customers.append(customer)
        return Result.ok(customer)

    def authenticate(self, username: str, password: str) -> Result:
        # First match wins
        for customer in self._customers:
            if customer.get_username() == username and customer.check_password(password):
                return Result.ok(customer)
        return Result.fail(RentalError.INVALID_CREDENTIALS)

    def reset_password(self, username: str, new_password: str) -> Result:
        customer = self.find(username)
        if customer is None:
            return Result.fail(RentalError.USER_NOT_FOUND)
        customer.set_password(new_password)
        return Result.ok(customer)

    def find(self, username: str) -> Optional[Customer]:
        for customer in self._customers:
            if customer.get_username() == username:
                return customer
        return None

    def all_customers(self) -> List[Customer]:
        return list(self._customers)

    def __len__(self) -> int:
        return len(self._customers)


# ==================== Feedback Log ====================

class FeedbackLog:
    """Append-only (username, comment) log"""

    def __init__(self):
        self._entries: List[Feedback] = []

    def submit(self, username: Optional[str], comment: str) -> Result:
        if not username:
            return Result.fail(RentalError.NOT_AUTHENTICATED,
                               "Please login as customer to give feedback.")
        entry = Feedback(username, comment)
        self._entries.append(entry)
        return Result.ok(entry)

    def all_feedback(self) -> List[Feedback]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# ==================== Strategy Pattern: Admin Authentication ====================

class AdminAuthenticator(ABC):
    """Checks administrator credentials"""

    @abstractmethod
    def authenticate(self, username: str, password: str) -> bool:
        pass


class StaticAdminAuthenticator(AdminAuthenticator):
    """Single fixed admin identity, exact literal match"""

    def __init__(self, username: str = "admin", password: str = "admin123"):
        self._username = username
        self._password = password

    def authenticate(self, username: str, password: str) -> bool:
        return username == self._username and password == self._password


# ==================== Configuration ====================

DEFAULT_CATALOG: List[Tuple[VehicleCategory, str, str, Decimal]] = [
    (VehicleCategory.SEDAN, "Toyota", "Camry", Decimal('50')),
    (VehicleCategory.SUV, "Honda", "CR-V", Decimal('65')),
    (VehicleCategory.TRUCK, "Ford", "F-150", Decimal('80')),
]


@dataclass
class RentalConfig:
    min_rental_days: int = 1
    max_rental_days: int = 30
    admin_username: str = "admin"
    admin_password: str = "admin123"
    currency_symbol: str = "$"
    max_price_per_day: Decimal = MAX_PRICE_PER_DAY
    seed_catalog: bool = True
    catalog: List[Tuple[VehicleCategory, str, str, Decimal]] = field(
        default_factory=lambda: list(DEFAULT_CATALOG))


# ==================== Rental Service ====================

class RentalService:
    """Orchestrates catalog, ledger, directory and feedback behind one active session"""

    def __init__(self, config: Optional[RentalConfig] = None,
                 admin_authenticator: Optional[AdminAuthenticator] = None):
        self._config = config or RentalConfig()
        self._catalog = VehicleCatalog(self._config.max_price_per_day)
        self._ledger = BookingLedger(self._config.min_rental_days,
                                     self._config.max_rental_days,
                                     self._config.currency_symbol)
        self._directory = CustomerDirectory()
        self._feedback = FeedbackLog()
        self._admin_authenticator = admin_authenticator or StaticAdminAuthenticator(
            self._config.admin_username, self._config.admin_password)
        self._active_session: Optional[Session] = None
        self._active_customer: Optional[Customer] = None

        if self._config.seed_catalog:
            for category, brand, model, price in self._config.catalog:
                self._catalog.add_vehicle(category, brand, model, price)

    def get_config(self) -> RentalConfig:
        return self._config

    def get_catalog(self) -> VehicleCatalog:
        return self._catalog

    def get_directory(self) -> CustomerDirectory:
        return self._directory

    # ---------- sessions ----------

    def _open_session(self, role: SessionRole, username: str,
                      customer: Optional[Customer] = None) -> Session:
        if self._active_session is not None:
            logger.info("Replacing active session of %s", self._active_session.username)
        session = Session(token=uuid.uuid4().hex, role=role, username=username)
        self._active_session = session
        self._active_customer = customer
        return session

    def _check_session(self, session: Optional[Session], role: SessionRole) -> Optional[Result]:
        """Returns a failed Result when the session may not perform a role-scoped call"""
        active = self._active_session
        if session is None or active is None or session.token != active.token:
            return Result.fail(RentalError.NOT_AUTHENTICATED)
        if session.role != role:
            if role == SessionRole.ADMIN:
                return Result.fail(RentalError.PERMISSION_DENIED)
            return Result.fail(RentalError.NOT_AUTHENTICATED,
                               "Please login as customer to continue.")
        return None

    def current_session(self) -> Optional[Session]:
        return self._active_session

    def current_user(self) -> Optional[Customer]:
        return self._active_customer

    def logout(self, session: Optional[Session]) -> Result:
        active = self._active_session
        if session is None or active is None or session.token != active.token:
            return Result.fail(RentalError.NOT_AUTHENTICATED)
        logger.info("Logged out %s", session.username)
        self._active_session = None
        self._active_customer = None
        return Result.ok()

    # ---------- accounts ----------

    def register(self, name: str, username: str, password: str) -> Result:
        result = self._directory.register(name, username, password)
        if result:
            logger.info("Registered customer %s", username)
        else:
            logger.warning("Registration rejected for %s: %s", username, result.get_error().name)
        return result

    def login_customer(self, username: str, password: str) -> Result:
        result = self._directory.authenticate(username, password)
        if not result:
            logger.warning("Customer login failed for %s", username)
            return result
        customer = result.get_value()
        session = self._open_session(SessionRole.CUSTOMER, customer.get_username(), customer)
        logger.info("Customer %s logged in", username)
        return Result.ok(session)

    def login_admin(self, username: str, password: str) -> Result:
        if not self._admin_authenticator.authenticate(username, password):
            logger.warning("Admin login failed for %s", username)
            return Result.fail(RentalError.INVALID_CREDENTIALS, "Invalid admin credentials!")
        session = self._open_session(SessionRole.ADMIN, username)
        logger.info("Admin %s logged in", username)
        return Result.ok(session)

    def reset_password(self, username: str, new_password: str) -> Result:
        # No old-password check
        result = self._directory.reset_password(username, new_password)
        if result:
            logger.info("Password reset for %s", username)
        else:
            logger.warning("Password reset failed, unknown user %s", username)
        return result

    # ---------- catalog ----------

    def add_vehicle(self, session: Optional[Session], category: Any, brand: str,
                    model: str, price_per_day: Any) -> Result:
        denied = self._check_session(session, SessionRole.ADMIN)
        if denied is not None:
            return denied
        result = self._catalog.add_vehicle(category, brand, model, price_per_day)
        if result:
            logger.info("Added %r", result.get_value())
        else:
            logger.warning("Add vehicle rejected: %s", result.get_message())
        return result

    def list_vehicles(self) -> List[Tuple[int, Vehicle]]:
        return self._catalog.list_all()

    def list_available_vehicles(self) -> List[Tuple[int, Vehicle]]:
        return self._catalog.list_available()

    # ---------- rentals ----------

    def rent_vehicle(self, session: Optional[Session], vehicle_index: Any, days: Any) -> Result:
        """Rent a vehicle for the session's customer; nothing changes unless every check passes"""
        denied = self._check_session(session, SessionRole.CUSTOMER)
        if denied is not None:
            return denied

        lookup = self._catalog.get(vehicle_index)
        if not lookup:
            logger.warning("Rent rejected: no vehicle at %r", vehicle_index)
            return lookup
        vehicle = lookup.get_value()

        if not vehicle.is_available():
            logger.warning("Rent rejected: %r is already rented", vehicle)
            return Result.fail(RentalError.ALREADY_RENTED)

        if not self._ledger.is_valid_duration(days):
            logger.warning("Rent rejected: invalid duration %r", days)
            return self._ledger.duration_error()

        booking_result = self._ledger.create_booking(vehicle, days)
        if not booking_result:
            return booking_result
        booking = booking_result.get_value()

        customer = self._active_customer
        vehicle.set_available(False)
        customer.add_rented_vehicle(vehicle.get_id())
        customer.record_booking(booking)

        logger.info("%s rented %r for %d days, total %s",
                    customer.get_username(), vehicle, days, booking.total_cost)
        return Result.ok(booking)

    def return_vehicle(self, session: Optional[Session], vehicle_index: Any) -> Result:
        denied = self._check_session(session, SessionRole.CUSTOMER)
        if denied is not None:
            return denied

        lookup = self._catalog.get(vehicle_index)
        if not lookup:
            logger.warning("Return rejected: no vehicle at %r", vehicle_index)
            return lookup
        vehicle = lookup.get_value()

        if vehicle.is_available():
            logger.warning("Return rejected: %r is not rented", vehicle)
            return Result.fail(RentalError.NOT_RENTED)

        customer = self._active_customer
        if not customer.is_renting(vehicle.get_id()):
            logger.warning("Return rejected: %r is not held by %s",
                           vehicle, customer.get_username())
            return Result.fail(RentalError.NOT_YOUR_RENTAL)

        vehicle.set_available(True)
        customer.remove_rented_vehicle(vehicle.get_id())
        logger.info("%s returned %r", customer.get_username(), vehicle)
        return Result.ok(vehicle)

    def booking_history(self, session: Optional[Session]) -> Result:
        denied = self._check_session(session, SessionRole.CUSTOMER)
        if denied is not None:
            return denied
        return Result.ok(self._active_customer.history())

    def rented_vehicles(self, session: Optional[Session]) -> Result:
        denied = self._check_session(session, SessionRole.CUSTOMER)
        if denied is not None:
            return denied
        return Result.ok(self._active_customer.get_rented_vehicle_ids())

    def render_receipt(self, booking: Booking) -> str:
        """Receipt for the active customer"""
        name = self._active_customer.get_name() if self._active_customer else ""
        return self._ledger.render_receipt(booking, name)

    # ---------- feedback ----------

    def submit_feedback(self, session: Optional[Session], comment: str) -> Result:
        denied = self._check_session(session, SessionRole.CUSTOMER)
        if denied is not None:
            return Result.fail(RentalError.NOT_AUTHENTICATED,
                               "Please login as customer to give feedback.")
        result = self._feedback.submit(session.username, comment)
        if result:
            logger.info("Feedback received from %s", session.username)
        return result

    def all_feedback(self, session: Optional[Session]) -> Result:
        denied = self._check_session(session, SessionRole.ADMIN)
        if denied is not None:
            return denied
        return Result.ok(self._feedback.all_feedback())


# ==================== Factory Pattern ====================

class CarRentalSystemFactory:
    """Factory for creating configured rental services"""

    @staticmethod
    def create_default_system(config: Optional[RentalConfig] = None) -> RentalService:
        """Seeded with the default catalog and the fixed admin identity unless config says otherwise"""
        return RentalService(config or RentalConfig())

    @staticmethod
    def create_empty_system() -> RentalService:
        return RentalService(RentalConfig(seed_catalog=False))

    @staticmethod
    def create_system(config: RentalConfig,
                      admin_authenticator: Optional[AdminAuthenticator] = None) -> RentalService:
        return RentalService(config, admin_authenticator)


# ==================== Console Menus ====================

VEHICLE_TYPE_CHOICES: Dict[int, str] = {
    1: VehicleCategory.SEDAN.value,
    2: VehicleCategory.SUV.value,
    3: VehicleCategory.TRUCK.value,
}


class RentalConsole:
    """Interactive menus over a RentalService"""

    def __init__(self, service: RentalService):
        self._service = service
        self._currency = service.get_config().currency_symbol

    @staticmethod
    def _read(prompt: str) -> str:
        return input(prompt).strip()

    def _read_int(self, prompt: str) -> Optional[int]:
        raw = self._read(prompt)
        try:
            return int(raw)
        except ValueError:
            return None

    @staticmethod
    def _report(result: Result, success_message: str) -> None:
        if result:
            print(f"✅ {success_message}")
        else:
            print(f"❌ {result.get_message()}")

    def run(self) -> None:
        while True:
            print("\n" + "=" * 40)
            print("       🚗 Car Rental System Main Menu 🚗")
            print("=" * 40)
            print("1. Customer Registration")
            print("2. Customer Login")
            print("3. Admin Login")
            print("4. Exit")
            print("=" * 40)
            choice = self._read_int("Enter your choice: ")

            if choice == 1:
                self._register()
            elif choice == 2:
                self._customer_login()
            elif choice == 3:
                self._admin_login()
            elif choice == 4:
                print("\n👋 Thank you for using the Car Rental System. Goodbye!")
                return
            else:
                print("❌ Invalid choice! Please try again.")

    def _register(self) -> None:
        name = self._read("Enter Name: ")
        username = self._read("Enter Username: ")
        password = self._read("Enter Password: ")
        result = self._service.register(name, username, password)
        self._report(result, "User registered successfully!")

    def _customer_login(self) -> None:
        username = self._read("Enter Username: ")
        password = self._read("Enter Password: ")
        result = self._service.login_customer(username, password)
        if not result:
            print(f"❌ {result.get_message()}")
            self._offer_password_reset()
            return

        customer = self._service.current_user()
        print(f"✅ Login successful! Welcome, {customer.get_name()}.")
        self._customer_menu(result.get_value())

    def _offer_password_reset(self) -> None:
        answer = self._read("Forgot password? (y/n): ")
        if answer.lower() != "y":
            return
        username = self._read("Enter your username: ")
        new_password = self._read("Enter new password: ")
        result = self._service.reset_password(username, new_password)
        self._report(result, f"Password has been reset successfully for user {username}!")

    def _show_available(self) -> None:
        print("\n" + render_vehicle_listing(
            "Available Vehicles", self._service.list_available_vehicles(),
            "❗ No vehicles available at the moment.", self._currency))

    def _customer_menu(self, session: Session) -> None:
        while True:
            print("\n--------- Customer Menu ---------")
            print("1. View Available Vehicles")
            print("2. Rent Vehicle")
            print("3. Return Vehicle")
            print("4. View Booking History")
            print("5. Submit Feedback")
            print("6. Logout")
            print("---------------------------------")
            choice = self._read_int("Enter your choice: ")

            if choice == 1:
                self._show_available()
            elif choice == 2:
                self._show_available()
                index = self._read_int("Enter vehicle number to rent: ")
                days = self._read_int(
                    f"Enter number of days to rent (max {self._service.get_config().max_rental_days}): ")
                result = self._service.rent_vehicle(session, index, days)
                self._report(result, "Vehicle rented successfully!")
                if result:
                    print("\n" + self._service.render_receipt(result.get_value()))
            elif choice == 3:
                index = self._read_int("Enter vehicle number to return: ")
                result = self._service.return_vehicle(session, index)
                self._report(result, "Vehicle returned successfully!")
            elif choice == 4:
                result = self._service.booking_history(session)
                if result:
                    name = self._service.current_user().get_name()
                    print("\n" + render_history(name, result.get_value(), self._currency))
                else:
                    print(f"❌ {result.get_message()}")
            elif choice == 5:
                comment = self._read("Enter feedback: ")
                result = self._service.submit_feedback(session, comment)
                self._report(result, "Feedback submitted. Thank you!")
            elif choice == 6:
                self._service.logout(session)
                print("👋 Logging out...")
                return
            else:
                print("❌ Invalid choice! Please try again.")

    def _admin_login(self) -> None:
        username = self._read("Enter Admin username: ")
        password = self._read("Enter Admin password: ")
        result = self._service.login_admin(username, password)
        if not result:
            print(f"❌ {result.get_message()}")
            return
        print("✅ Admin login successful!")
        self._admin_menu(result.get_value())

    def _admin_menu(self, session: Session) -> None:
        while True:
            print("\n-------- Admin Menu --------")
            print("1. Add New Vehicle")
            print("2. View All Vehicles")
            print("3. View All Feedback")
            print("4. Logout")
            print("----------------------------")
            choice = self._read_int("Enter your choice: ")

            if choice == 1:
                type_choice = self._read_int("Select vehicle type (1: Sedan, 2: SUV, 3: Truck): ")
                brand = self._read("Enter brand: ")
                model = self._read("Enter model: ")
                price = self._read("Enter price per day: ")
                category = VEHICLE_TYPE_CHOICES.get(type_choice, str(type_choice))
                result = self._service.add_vehicle(session, category, brand, model, price)
                if result:
                    print(f"✅ {category} added successfully!")
                else:
                    print(f"❌ {result.get_message()}")
            elif choice == 2:
                print("\n" + render_vehicle_listing(
                    "All Vehicles", self._service.list_vehicles(),
                    "No vehicles have been added to the system yet.", self._currency))
            elif choice == 3:
                result = self._service.all_feedback(session)
                if result:
                    print("\n" + render_feedback(result.get_value()))
                else:
                    print(f"❌ {result.get_message()}")
            elif choice == 4:
                self._service.logout(session)
                print("👋 Admin logged out.")
                return
            else:
                print("❌ Invalid choice! Please try again.")


# ==================== Main Entry Point ====================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Console car rental system")
    parser.add_argument("--no-seed", action="store_true",
                        help="start with an empty vehicle catalog")
    parser.add_argument("--verbose", action="store_true",
                        help="log every state change")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if args.no_seed:
        service = CarRentalSystemFactory.create_empty_system()
    else:
        service = CarRentalSystemFactory.create_default_system()

    try:
        RentalConsole(service).run()
    except (KeyboardInterrupt, EOFError):
        print("\n\n👋 Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
