from abc import ABC, abstractmethod

COMPANY_NAME = "AutoWorld Inc."


class InvalidVehicleError(ValueError):
    """Raised when a vehicle is built with a non-positive attribute"""


class Vehicle(ABC):
    """Base class for vehicle properties"""

    TYPE_TAG = "Vehicle"   # Leading token of a persisted record
    EXTRA_FIELD = None     # Name of the variant's integer attribute

    def __init__(self, brand, model):
        """Initialize common vehicle attributes"""
        self.brand = brand     # Manufacturer name
        self.model = model     # Model name

    @classmethod
    def restore(cls, brand, model, value):
        """Rebuild a vehicle from persisted fields, skipping the range check"""
        vehicle = cls.__new__(cls)
        vehicle.read_fields([brand, model, value])
        return vehicle

    @property
    def extra_value(self):
        return getattr(self, self.EXTRA_FIELD)

    def get_basic_info(self):
        """Return basic info as text"""
        return f"Brand: {self.brand}, Model: {self.model}"

    @abstractmethod
    def describe(self):
        """Return the full one-line description"""

    def display_info(self):
        """Print formatted vehicle information"""
        print(self.describe())

    def update_model(self, new_model):
        self.model = new_model

    def to_line(self):
        """Serialize as '<Type> <brand> <model> <extra>' (no escaping)"""
        return f"{self.TYPE_TAG} {self.brand} {self.model} {self.extra_value}"

    def read_fields(self, tokens):
        """Overwrite brand, model and the extra field from three tokens.

        The extra value is not range checked, so a persisted 0 or negative
        number is accepted here even though the constructor rejects it.
        """
        brand, model, value = tokens
        self.brand = brand
        self.model = model
        setattr(self, self.EXTRA_FIELD, int(value))
