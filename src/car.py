'''
This module defines the Car variant: a vehicle with a number of seats.
'''

from vehicle import COMPANY_NAME, InvalidVehicleError, Vehicle


class Car(Vehicle):
    TYPE_TAG = "Car"
    EXTRA_FIELD = "seats"

    def __init__(self, brand, model, seats):
        super().__init__(brand, model)
        self.seats = seats  # must be positive

        if self.seats <= 0:
            raise InvalidVehicleError(f"Invalid number of seats: {self.seats}")

    def describe(self):
        return f"{self.get_basic_info()}, Type: Car, Seats: {self.seats}, Company: {COMPANY_NAME}"
