from vehicle import COMPANY_NAME, InvalidVehicleError, Vehicle


class Motorbike(Vehicle):
    """Two-wheeled vehicle with an engine capacity in CC"""

    TYPE_TAG = "Motorbike"
    EXTRA_FIELD = "engine_capacity"

    def __init__(self, brand, model, engine_capacity):
        super().__init__(brand, model)
        self.engine_capacity = engine_capacity  # in CC

        if self.engine_capacity <= 0:
            raise InvalidVehicleError(f"Invalid engine capacity: {self.engine_capacity}")

    def describe(self):
        return (f"{self.get_basic_info()}, Type: Motorbike, "
                f"Engine Capacity: {self.engine_capacity}cc, Company: {COMPANY_NAME}")
